from __future__ import annotations

SNAPSHOT_SUFFIX = "-SNAPSHOT"

ARTIFACT_SUFFIXES = (
    ".jar",
    ".jar.sha1",
    ".pom",
    ".pom.sha1",
    ".war",
    ".war.sha1",
)

LOCAL_METADATA_FILE = "maven-metadata-local.xml"


def is_snapshot_folder(folder_name: str) -> bool:
    return folder_name.endswith(SNAPSHOT_SUFFIX)


def is_local_metadata(file_name: str) -> bool:
    return file_name == LOCAL_METADATA_FILE


def should_evaluate(folder_name: str, file_name: str) -> bool:
    """Return True when a file found in *folder_name* is worth a closer look.

    Released artifacts outside snapshot folders are never touched; only the
    local metadata file is picked up everywhere.
    """
    return is_snapshot_folder(folder_name) or is_local_metadata(file_name)


def stale_suffix(folder_name: str, file_name: str) -> str | None:
    """Return the matched artifact suffix when *file_name* is a stale artifact.

    A file is stale when it carries a recognized suffix but does not embed the
    name of the version folder it lives in.
    """
    if folder_name in file_name:
        return None
    for suffix in ARTIFACT_SUFFIXES:
        if file_name.endswith(suffix):
            return suffix
    return None
