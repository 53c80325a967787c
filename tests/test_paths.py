"""Tests for confining image access to the permitted directories."""

from __future__ import annotations

import os

import pytest

from imagevision.config import VisionConfig
from imagevision.errors import PathNotFoundError, PathOutsideRootsError
from imagevision.security.paths import DenialReason, PathAuthorizer, authorize


def test_existing_file_under_root_is_allowed(image_root) -> None:
    result = authorize(image_root / "cat.png", [image_root])

    assert result.allowed
    assert result.reason is None
    assert result.path == (image_root / "cat.png").resolve()


def test_root_directory_itself_is_allowed(image_root) -> None:
    assert authorize(image_root, [image_root]).allowed


def test_existing_file_outside_roots_is_denied(image_root, outside_file) -> None:
    result = authorize(outside_file, [image_root])

    assert not result.allowed
    assert result.reason is DenialReason.OUTSIDE_ROOTS


def test_missing_file_under_root_is_not_found(image_root) -> None:
    result = authorize(image_root / "missing.png", [image_root])

    assert result.reason is DenialReason.NOT_FOUND


def test_missing_file_outside_roots_is_not_found(image_root, tmp_path) -> None:
    # existence is checked before containment
    result = authorize(tmp_path / "elsewhere" / "missing.png", [image_root])

    assert result.reason is DenialReason.NOT_FOUND


def test_sibling_directory_sharing_prefix_is_denied(tmp_path) -> None:
    root = tmp_path / "mcp"
    root.mkdir()
    sibling = tmp_path / "mcpother"
    sibling.mkdir()
    candidate = sibling / "file.png"
    candidate.write_bytes(b"png")

    result = authorize(candidate, [root])

    assert result.reason is DenialReason.OUTSIDE_ROOTS


def test_parent_segments_cannot_escape_root(image_root, outside_file) -> None:
    candidate = f"{image_root}/../{outside_file.name}"

    assert authorize(candidate, [image_root]).reason is DenialReason.OUTSIDE_ROOTS


def test_dot_segments_inside_root_are_collapsed(image_root) -> None:
    candidate = f"{image_root}/./sub/../cat.png"

    assert authorize(candidate, [image_root]).allowed


def test_relative_path_resolves_against_working_directory(image_root, monkeypatch) -> None:
    monkeypatch.chdir(image_root)

    assert authorize("cat.png", [image_root]).allowed


def test_relative_root_resolves_against_working_directory(image_root, monkeypatch) -> None:
    monkeypatch.chdir(image_root.parent)

    assert authorize(image_root / "cat.png", ["images"]).allowed


def test_any_of_several_roots_allows(tmp_path, image_root) -> None:
    other = tmp_path / "other"
    other.mkdir()

    assert authorize(image_root / "dog.jpg", [other, image_root]).allowed


def test_symlink_out_of_root_is_denied(image_root, outside_file) -> None:
    link = image_root / "escape.png"
    try:
        os.symlink(outside_file, link)
    except (OSError, NotImplementedError):
        pytest.skip("symlinks unavailable")

    assert authorize(link, [image_root]).reason is DenialReason.OUTSIDE_ROOTS


def test_authorizer_raises_matching_errors(config, image_root, outside_file) -> None:
    authorizer = PathAuthorizer(config)

    assert authorizer.ensure_allowed(str(image_root / "cat.png")) == (image_root / "cat.png").resolve()
    with pytest.raises(PathNotFoundError, match="Path does not exist"):
        authorizer.ensure_allowed(str(image_root / "nope.png"))
    with pytest.raises(PathOutsideRootsError, match="Not in permitted directories"):
        authorizer.ensure_allowed(str(outside_file))


def test_uniform_denials_hide_existence(image_root, outside_file) -> None:
    authorizer = PathAuthorizer(VisionConfig((image_root,), uniform_denials=True))
    messages = set()
    for candidate in (str(outside_file), str(image_root.parent / "ghost.png")):
        try:
            authorizer.ensure_allowed(candidate)
        except (PathNotFoundError, PathOutsideRootsError) as exc:
            messages.add(authorizer.denial_message(exc))

    assert messages == {"Path not allowed: Not in permitted directories or does not exist"}


def _make_symlink_loop(root):
    loop = root / "loop.png"
    try:
        os.symlink(loop, loop)
    except (OSError, NotImplementedError):
        pytest.skip("symlinks unavailable")
    return loop


def test_unreadable_names_are_not_found(image_root) -> None:
    loop = _make_symlink_loop(image_root)
    candidates = [
        f"{image_root}/a\x00b.png",
        str(image_root / ("x" * 300)),
        str(loop),
    ]

    for candidate in candidates:
        assert authorize(candidate, [image_root]).reason is DenialReason.NOT_FOUND


def test_unreadable_names_raise_not_found_error(config, image_root) -> None:
    authorizer = PathAuthorizer(config)

    with pytest.raises(PathNotFoundError):
        authorizer.ensure_allowed("/data/a\x00b.png")
