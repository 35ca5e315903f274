import foxyapply.config as config
from foxyapply.browser.scope import css
from foxyapply.interaction.buttons import click_when_clickable
from foxyapply.state.detector import has_errors, is_present, scopes_with_errors
from fakes import FakeElement, FakeScope

ERROR = config.ERROR_ICON_SELECTOR
NEXT = css(config.NEXT_BUTTON_SELECTOR)


def test_error_in_main_document_uses_presence_budget():
    page = FakeScope({ERROR: [FakeElement()]})
    assert has_errors(page)
    assert page.lookups[0] == (ERROR, config.PRESENCE_TIMEOUT)


def test_no_errors_anywhere():
    page = FakeScope(embedded=[FakeScope(), FakeScope()])
    assert not has_errors(page)


def test_error_inside_iframe():
    frame = FakeScope({ERROR: [FakeElement()]})
    page = FakeScope(embedded=[FakeScope(), frame])
    assert has_errors(page)
    assert scopes_with_errors(page) == [frame]


def test_error_inside_iframe_shadow_root():
    shadow = FakeScope({ERROR: [FakeElement()]})
    frame = FakeScope({config.MODAL_HOST_SELECTOR: [FakeElement(shadow=shadow)]})
    page = FakeScope(embedded=[frame])
    assert has_errors(page)
    assert scopes_with_errors(page) == [frame]


def test_is_present_checks_embedded_documents():
    frame = FakeScope({NEXT.query: [FakeElement()]})
    assert is_present(FakeScope(embedded=[frame]), NEXT)
    assert not is_present(FakeScope(embedded=[FakeScope()]), NEXT)


def test_main_document_control_gets_direct_click():
    button = FakeElement("next")
    page = FakeScope({NEXT.query: [button]})

    assert click_when_clickable(page, NEXT)
    assert button.events == [("click", "next")]
    assert page.lookups[0] == (NEXT.query, config.CLICK_TIMEOUT)


def test_embedded_control_gets_keyboard_activation():
    button = FakeElement("next")
    page = FakeScope(embedded=[FakeScope({NEXT.query: [button]})])

    assert click_when_clickable(page, NEXT)
    assert button.events == [("scroll", "next"), ("focus", "next"), ("press", "next", "Enter")]


def test_missing_control_is_not_clickable():
    assert not click_when_clickable(FakeScope(embedded=[FakeScope()]), NEXT)


def test_failed_click_reports_false():
    def boom():
        raise RuntimeError("element is detached")

    page = FakeScope({NEXT.query: [FakeElement("next", on_click=boom)]})
    assert not click_when_clickable(page, NEXT)
