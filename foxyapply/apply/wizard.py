"""Easy Apply wizard driver"""

import foxyapply.config as config
from foxyapply.apply.fill import handle_inline_errors
from foxyapply.browser.scope import css
from foxyapply.interaction.buttons import click_when_clickable
from foxyapply.state.detector import has_errors, is_present
from foxyapply.utils.timing import form_pause

ADVANCE = css(config.NEXT_BUTTON_SELECTOR)
REVIEW = css(config.REVIEW_BUTTON_SELECTOR)
FOLLOW_COMPANY = css(config.FOLLOW_LABEL_SELECTOR)
SUBMIT = css(config.SUBMIT_BUTTON_SELECTOR)

# Priority order matters: at most one step-changing action per pass
WIZARD_ACTIONS = (ADVANCE, REVIEW, FOLLOW_COMPANY, SUBMIT)


class EasyApplyWizard:
    """
    Bounded state machine over the wizard's controls.

    The only explicit state is ``submitted``; which step the wizard is on is
    read off whichever control is actionable. Controls change identity
    between steps, so after advancing the DOM is re-read from the top instead
    of chaining actions on stale handles.
    """

    def __init__(self, page, profile, fallback=None, max_iterations=config.MAX_FORM_ITERATIONS):
        self.page = page
        self.profile = profile
        self.fallback = fallback
        self.max_iterations = max_iterations
        self.submitted = False
        self.iterations = 0

    def repair(self):
        return handle_inline_errors(self.page, self.profile, self.fallback)

    def step(self):
        """One pass over the action list"""
        self.repair()
        for locator in WIZARD_ACTIONS:
            if is_present(self.page, locator) and not has_errors(self.page):
                if click_when_clickable(self.page, locator):
                    form_pause()
                    if locator is SUBMIT:
                        self.submitted = True
                        return
                    if locator is ADVANCE:
                        return
            self.repair()

    def run(self):
        form_pause()
        try:
            while not self.submitted and self.iterations < self.max_iterations:
                self.iterations += 1
                print(f"  Wizard pass {self.iterations}/{self.max_iterations}")
                self.step()
        finally:
            form_pause()

        if self.submitted:
            print("  ✓ Application submitted")
        else:
            print(f"  ⚠️ Wizard not submitted after {self.iterations} passes")
        return self.submitted


def fill_out_easy_apply_form(page, profile, fallback=None, max_iterations=config.MAX_FORM_ITERATIONS):
    """Drive the open wizard to submission. False means "could not complete", not an error."""
    return EasyApplyWizard(page, profile, fallback, max_iterations).run()
