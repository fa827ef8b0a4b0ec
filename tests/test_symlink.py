import os

from deluxels.symlink import DEFAULT_ARROW, SymLink


def test_render_default_valid_target():
    link = SymLink(target="/target", valid=True)
    assert link.render() == " \u21d2 /target"


def test_render_default_invalid_target():
    link = SymLink(target="/target", valid=False)
    assert link.render() == " \u21d2 /target"


def test_render_custom_arrow():
    assert SymLink(target="t", valid=True).render("->") == " -> t"


def test_render_without_target_is_empty():
    assert SymLink().render(DEFAULT_ARROW) == ""


def test_regular_file_is_not_a_link(tmp_path):
    path = tmp_path / "plain"
    path.touch()
    link = SymLink.from_path(path)
    assert link.target is None
    assert link.valid is False


def test_relative_link_to_existing_file(tmp_path):
    (tmp_path / "target").touch()
    os.symlink("target", tmp_path / "link")
    link = SymLink.from_path(tmp_path / "link")
    assert link.target == "target"
    assert link.valid is True
    assert link.symlink_string == "target"


def test_broken_link(tmp_path):
    os.symlink("not-existed-file", tmp_path / "broken-softlink")
    link = SymLink.from_path(tmp_path / "broken-softlink")
    assert link.target == "not-existed-file"
    assert link.valid is False
    assert link.render() == " \u21d2 not-existed-file"


def test_absolute_link(tmp_path):
    target = tmp_path / "abs-target"
    target.touch()
    os.symlink(str(target), tmp_path / "abs-link")
    link = SymLink.from_path(str(tmp_path / "abs-link"))
    assert link.target == str(target)
    assert link.valid is True