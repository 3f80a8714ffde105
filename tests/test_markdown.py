import pytest

from coursebook.markdown import duration, relative_link


def test_relative_link_same_dir():
    assert relative_link("welcome.md", "hello-world.md") == "./hello-world.md"


def test_relative_link_subdir():
    assert relative_link("hello-world.md", "hello-world/foo.md") == "./hello-world/foo.md"


def test_relative_link_parent_dir():
    assert relative_link("references/foo.md", "hello-world.md") == "../hello-world.md"


def test_relative_link_deep_parent_dir():
    assert relative_link("references/foo/bar.md", "hello-world.md") == "../../hello-world.md"


def test_relative_link_peer_dir():
    assert relative_link("references/foo.md", "hello-world/foo.md") == "../hello-world/foo.md"


def test_duration_no_time():
    assert duration(0) == "0 minutes"


def test_duration_single_minute():
    assert duration(1) == "1 minute"


def test_duration_two_minutes():
    assert duration(2) == "2 minutes"


def test_duration_seven_minutes():
    assert duration(7) == "10 minutes"


def test_duration_hour():
    assert duration(60) == "1 hour"


def test_duration_hour_mins():
    assert duration(61) == "1 hour and 5 minutes"


def test_duration_hours():
    assert duration(120) == "2 hours"


def test_duration_hours_mins():
    assert duration(130) == "2 hours and 10 minutes"


def test_duration_negative_is_rejected():
    with pytest.raises(ValueError):
        duration(-1)