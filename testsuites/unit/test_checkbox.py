import pytest

from ui_harness.framework.exceptions import ElementNotFound, StaleElement, WaitTimeout

from testsuites.unit.fake_browser import FakeElement


@pytest.fixture
def checkboxes(session):
    return session.checkboxes


def test_select_is_idempotent(fake_page, checkboxes):
    box = fake_page.add("#remember-me", FakeElement())

    assert checkboxes.select("#remember-me") is True
    assert checkboxes.select("#remember-me") is False

    assert box.count("click") == 1
    assert checkboxes.is_checked("#remember-me") is True


def test_deselect_only_clicks_checked_box(fake_page, checkboxes):
    box = fake_page.add("#newsletter", FakeElement(checked=True))

    assert checkboxes.deselect("#newsletter") is True
    assert checkboxes.deselect("#newsletter") is False

    assert box.checked is False
    assert box.count("click") == 1


def test_toggle_always_clicks(fake_page, checkboxes):
    box = fake_page.add("#terms", FakeElement())

    checkboxes.toggle("#terms")
    checkboxes.toggle("#terms")

    assert box.count("click") == 2
    assert checkboxes.is_checked("#terms") is False


def test_select_waits_for_enabled_box(fake_page, checkboxes):
    fake_page.add("#locked", FakeElement(enabled=False))

    with pytest.raises(WaitTimeout):
        checkboxes.select("#locked", timeout=1)


def test_select_all_reaches_every_box(fake_page, checkboxes):
    boxes = [FakeElement(checked=(i == 1)) for i in range(3)]
    fake_page.add("input.filter", *boxes)

    outcome = checkboxes.select_all("input.filter")

    assert outcome.all_succeeded
    assert outcome.succeeded == [0, 1, 2]
    assert all(box.checked for box in boxes)
    assert [box.count("click") for box in boxes] == [1, 0, 1]


def test_batch_records_stale_member_and_continues(fake_page, checkboxes):
    boxes = [FakeElement() for _ in range(3)]
    boxes[1].stale_actions = 1
    fake_page.add("input.filter", *boxes)

    outcome = checkboxes.select_all("input.filter")

    assert outcome.succeeded == [0, 2]
    assert len(outcome.failed) == 1
    index, error = outcome.failed[0]
    assert index == 1
    assert isinstance(error, StaleElement)
    assert outcome.total == 3
    assert not outcome.all_succeeded
    assert boxes[0].checked and boxes[2].checked
    assert not boxes[1].checked


def test_batch_member_detached_before_wait_fails_fast(fake_page, checkboxes, clock):
    boxes = [FakeElement() for _ in range(3)]
    boxes[1].stale = True
    fake_page.add("input.filter", *boxes)

    outcome = checkboxes.select_all("input.filter")

    assert outcome.succeeded == [0, 2]
    index, error = outcome.failed[0]
    assert index == 1
    assert isinstance(error, StaleElement)
    assert clock.sleeps == []


def test_deselect_all_and_toggle_all(fake_page, checkboxes):
    boxes = [FakeElement(checked=True), FakeElement(checked=False)]
    fake_page.add("input.opt", *boxes)

    checkboxes.toggle_all("input.opt")
    assert [box.checked for box in boxes] == [False, True]

    checkboxes.deselect_all("input.opt")
    assert [box.checked for box in boxes] == [False, False]


def test_batch_with_no_matches_raises_not_found(checkboxes):
    with pytest.raises(ElementNotFound):
        checkboxes.select_all("input.none")
