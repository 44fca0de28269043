from __future__ import annotations

from maven_repo_cleaner.rules import (
    ARTIFACT_SUFFIXES,
    LOCAL_METADATA_FILE,
    is_local_metadata,
    is_snapshot_folder,
    should_evaluate,
    stale_suffix,
)


def test_is_snapshot_folder_is_case_sensitive_suffix_match() -> None:
    assert is_snapshot_folder("1.0-SNAPSHOT") is True
    assert is_snapshot_folder("1.0-snapshot") is False
    assert is_snapshot_folder("1.0-SNAPSHOT-rc") is False
    assert is_snapshot_folder("1.0") is False


def test_is_local_metadata_requires_exact_name() -> None:
    assert is_local_metadata(LOCAL_METADATA_FILE) is True
    assert is_local_metadata("maven-metadata-central.xml") is False
    assert is_local_metadata("old-maven-metadata-local.xml") is False


def test_should_evaluate_snapshot_files_and_metadata_anywhere() -> None:
    assert should_evaluate("1.0-SNAPSHOT", "foo-1.0-SNAPSHOT.jar") is True
    assert should_evaluate("1.0", "foo-0.9.jar") is False
    assert should_evaluate("foo", LOCAL_METADATA_FILE) is True


def test_stale_suffix_matches_every_recognized_suffix() -> None:
    for suffix in ARTIFACT_SUFFIXES:
        assert stale_suffix("1.0-SNAPSHOT", f"foo-1.0-20230101.120000-1{suffix}") == suffix


def test_stale_suffix_keeps_files_embedding_folder_name() -> None:
    assert stale_suffix("1.0-SNAPSHOT", "foo-1.0-SNAPSHOT.jar") is None
    assert stale_suffix("1.0-SNAPSHOT", "foo-1.0-SNAPSHOT.pom.sha1") is None


def test_stale_suffix_ignores_unrecognized_suffixes() -> None:
    assert stale_suffix("1.0-SNAPSHOT", "foo-1.0-20230101.120000-1.module") is None
    assert stale_suffix("1.0-SNAPSHOT", "_remote.repositories") is None
    assert stale_suffix("1.0-SNAPSHOT", "foo.jar.md5") is None
