import sys

from log_debounce.callsite import CallSite, call_site, caller_site


def _here() -> CallSite:
    return caller_site()


def test_same_line_in_loop_is_one_site() -> None:
    sites = {_here() for _ in range(5)}
    assert len(sites) == 1


def test_two_calls_on_one_line_are_distinct() -> None:
    first, second = _here(), _here()
    assert first != second
    assert first.lineno == second.lineno
    assert first.offset != second.offset


def test_caller_site_describes_calling_function() -> None:
    site = _here()
    assert site.filename == __file__
    assert site.qualname.endswith("test_caller_site_describes_calling_function")
    assert str(site).startswith(f"{__file__}:{site.lineno}")


def test_call_site_of_current_frame() -> None:
    frame = sys._getframe()
    site = call_site(frame)
    assert site.lineno == frame.f_lineno - 1
    assert site.filename == __file__
