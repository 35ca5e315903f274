from foxyapply.browser.session import BrowserSession


def test_applying_flag_accessors():
    session = BrowserSession(user_data_dir="unused")
    assert not session.is_applying()

    session.set_applying(True)
    assert session.is_applying()

    session.set_applying(False)
    assert not session.is_applying()


def test_close_without_launch_clears_applying():
    session = BrowserSession(user_data_dir="unused")
    session.set_applying(True)

    session.close()

    assert not session.is_applying()
    assert not session.is_running()
