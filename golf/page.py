# =========================
# page.py
# Hole page composition
# =========================

from flask import render_template
from markupsafe import Markup

from golf.hydration import hydrate


# =========================
# HolePage
# =========================
class HolePage:
    """
    Builds the hole page in a fixed order of stages, one template under
    templates/hole/ per stage. Each stage only appends, and a stage may run
    only once its predecessor has, so the data-* attributes can never land
    after #hole has been closed.

    Needs an app context for render_template.
    """

    STAGES = ("head", "auth_gate", "body", "roster", "close")

    def __init__(self, hole, langs, user_id, *, css_path, js_path,
                 client_id, hydrator=hydrate):
        self.hole = hole
        self.langs = langs
        self.user_id = user_id
        self.css_path = css_path
        self.js_path = js_path
        self.client_id = client_id
        self.hydrator = hydrator

        self._out = []
        self._done = 0

    def _enter(self, stage):
        expected = self.STAGES[self._done] if self._done < len(self.STAGES) else None
        if stage != expected:
            raise RuntimeError(f"hole page stage {stage!r} out of order, expected {expected!r}")
        self._done += 1

    def _emit(self, stage, **context):
        self._out.append(render_template(f"hole/{stage}.html", **context))

    # ---- 1. scaffolding ----
    def head(self):
        self._enter("head")
        self._emit("head", css_path=self.css_path, js_path=self.js_path)

    # ---- 2. attributes of #hole ----
    def auth_gate(self):
        self._enter("auth_gate")
        fragments = []
        if self.user_id:
            # Already escaped for a quoted attribute by the hydrator.
            fragments = [Markup(f) for f in self.hydrator(self.user_id, self.hole.id)]
        self._emit("auth_gate", fragments=fragments)

    # ---- 3. hole description ----
    def body(self):
        self._enter("body")
        self._emit(
            "body",
            user_id=self.user_id,
            client_id=self.client_id,
            hole=self.hole,
            preamble=Markup(self.hole.preamble),
        )

    # ---- 4. language tabs ----
    def roster(self):
        self._enter("roster")
        self._emit("roster", langs=self.langs)

    # ---- 5. ----
    def close(self):
        self._enter("close")
        self._emit("close")

    def render(self):
        for stage in self.STAGES[self._done:]:
            getattr(self, stage)()
        return Markup("".join(self._out))
