"""Tests for profile loading and merging."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import pytest

from goprofiles.errors import (
    DecodeError,
    ErrorCodes,
    KeyConflictError,
    LoadError,
    NoFileSpecifiedError,
    ProfileFileNotFoundError,
    ProfileNotFoundError,
    UnsupportedFileTypeError,
)
from goprofiles.loader import load, merge_profiles


# === path and format checks ===


class TestFileChecks:
    def test_empty_path_raises(self) -> None:
        with pytest.raises(NoFileSpecifiedError) as exc_info:
            load("", ["dev"])
        assert exc_info.value.code == ErrorCodes.NO_FILE_SPECIFIED

    def test_json_extension_unsupported(self) -> None:
        with pytest.raises(UnsupportedFileTypeError) as exc_info:
            load("custom.json", ["dev"])
        assert exc_info.value.extension == ".json"

    def test_no_extension_unsupported(self) -> None:
        with pytest.raises(UnsupportedFileTypeError):
            load("profiles", ["dev"])

    def test_extension_checked_before_existence(self, tmp_path: Path) -> None:
        with pytest.raises(UnsupportedFileTypeError):
            load(str(tmp_path / "missing.toml"))

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(ProfileFileNotFoundError) as exc_info:
            load(str(tmp_path / "missing.yaml"), ["dev"])
        assert isinstance(exc_info.value.cause, OSError)

    def test_directory_is_unreadable(self, tmp_path: Path) -> None:
        folder = tmp_path / "dir.yaml"
        folder.mkdir()
        with pytest.raises(ProfileFileNotFoundError):
            load(str(folder))

    def test_yml_extension_supported(self, write_profiles: Any) -> None:
        path = write_profiles({"dev": {"a": 1}}, name="profiles.yml")
        assert load(path, ["dev"]) == {"a": 1}

    def test_all_load_errors_share_base(self) -> None:
        with pytest.raises(LoadError):
            load("")


# === decoding ===


class TestDecoding:
    def test_invalid_yaml_raises_decode_error(self, fixtures_dir: Path) -> None:
        with pytest.raises(DecodeError) as exc_info:
            load(str(fixtures_dir / "invalid.yaml"), ["dev"])
        assert exc_info.value.cause is not None
        assert exc_info.value.__cause__ is exc_info.value.cause

    def test_non_mapping_document(self, tmp_path: Path) -> None:
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(DecodeError, match="not a mapping"):
            load(str(path), ["dev"])

    def test_namespace_not_a_mapping(self, tmp_path: Path) -> None:
        path = tmp_path / "scalar.yaml"
        path.write_text("goprofiles: 3\n")
        with pytest.raises(DecodeError, match="goprofiles"):
            load(str(path), ["dev"])

    def test_missing_namespace_means_no_profiles(self, fixtures_dir: Path) -> None:
        with pytest.raises(ProfileNotFoundError):
            load(str(fixtures_dir / "no_namespace.yaml"), ["dev"])

    def test_empty_file_with_no_profiles(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load(str(path)) == {}

    def test_invalid_utf8_raises_decode_error(self, tmp_path: Path) -> None:
        path = tmp_path / "binary.yaml"
        path.write_bytes(b"goprofiles:\n  dev:\n    key: \xff\xfe\xfa\n")
        with pytest.raises(DecodeError) as exc_info:
            load(str(path), ["dev"])
        assert isinstance(exc_info.value.cause, ValueError)

    def test_bare_extension_filename_is_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / ".yaml"
        path.write_text("goprofiles:\n  dev:\n    a: 1\n")
        assert load(str(path), ["dev"]) == {"a": 1}

    def test_yaml11_boolean_keys_are_stringified(self, tmp_path: Path) -> None:
        path = tmp_path / "bools.yaml"
        path.write_text("goprofiles:\n  dev:\n    on: 1\n    'off': 2\n")
        assert load(str(path), ["dev"]) == {"True": 1, "off": 2}

    def test_profile_body_not_a_mapping(self, write_profiles: Any) -> None:
        path = write_profiles({"dev": ["a", "b"]})
        with pytest.raises(DecodeError, match="'dev'"):
            load(path, ["dev"])


# === merging ===


class TestLoadProfiles:
    def test_single_profile(self, profiles_file: str) -> None:
        common = load(profiles_file, ["common"])
        assert common["some_float"] == 1.2
        assert common["nested"]["some_int"] == 1

    def test_dev_and_prod_separately(self, profiles_file: str) -> None:
        assert load(profiles_file, ["dev"])["some_string"] == "some string"
        assert load(profiles_file, ["prod"])["some_string"] == "some other string"

    def test_disjoint_profiles_union(self, profiles_file: str) -> None:
        merged = load(profiles_file, ["dev", "metrics"])
        assert merged == {"some_string": "some string", "debug": True, "port": 9090}

    def test_conflict_raises(self, profiles_file: str) -> None:
        with pytest.raises(KeyConflictError) as exc_info:
            load(profiles_file, ["dev", "prod"])
        assert exc_info.value.key == "some_string"
        assert "some_string" in str(exc_info.value)

    def test_unknown_profile_raises(self, profiles_file: str) -> None:
        with pytest.raises(ProfileNotFoundError) as exc_info:
            load(profiles_file, ["test"])
        assert exc_info.value.profile == "test"

    def test_no_profiles_gives_empty_mapping(self, profiles_file: str) -> None:
        assert load(profiles_file) == {}

    def test_empty_profile_logs_warning(self, profiles_file: str, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="goprofiles"):
            merged = load(profiles_file, ["empty", "metrics"])
        assert merged == {"port": 9090}
        assert "empty" in caplog.text


class TestMergeProfiles:
    def test_order_decides_first_error(self) -> None:
        available = {"a": {"x": 1}, "b": {"x": 2}}
        with pytest.raises(ProfileNotFoundError):
            merge_profiles(available, ["missing", "a", "b"])
        with pytest.raises(KeyConflictError):
            merge_profiles(available, ["a", "b", "missing"])

    def test_input_not_modified(self) -> None:
        available = {"a": {"x": 1}, "b": {"y": 2}}
        merged = merge_profiles(available, ["a", "b"])
        merged["z"] = 3
        assert available == {"a": {"x": 1}, "b": {"y": 2}}

    def test_nested_keys_do_not_merge(self) -> None:
        available = {"a": {"db": {"host": "h"}}, "b": {"db": {"port": 1}}}
        with pytest.raises(KeyConflictError) as exc_info:
            merge_profiles(available, ["a", "b"])
        assert exc_info.value.key == "db"

    def test_non_string_keys_are_stringified(self) -> None:
        merged = merge_profiles({"a": {1: "one"}}, ["a"])
        assert merged == {"1": "one"}

    def test_colliding_top_level_keys_in_one_profile(self, tmp_path: Path) -> None:
        path = tmp_path / "collide.yaml"
        path.write_text("goprofiles:\n  a:\n    1: int\n    '1': str\n")
        with pytest.raises(DecodeError, match="duplicate key '1'.*profile 'a'"):
            load(str(path), ["a"])

    def test_colliding_nested_keys_in_one_profile(self, tmp_path: Path) -> None:
        path = tmp_path / "collide.yaml"
        path.write_text("goprofiles:\n  a:\n    n:\n      1: int\n      '1': str\n")
        with pytest.raises(DecodeError, match="duplicate key '1'"):
            load(str(path), ["a"])

    def test_colliding_keys_across_profiles_conflict(self) -> None:
        with pytest.raises(KeyConflictError) as exc_info:
            merge_profiles({"a": {1: "int"}, "b": {"1": "str"}}, ["a", "b"])
        assert exc_info.value.key == "1"

    def test_same_profile_twice_conflicts(self) -> None:
        with pytest.raises(KeyConflictError):
            merge_profiles({"a": {"x": 1}}, ["a", "a"])
