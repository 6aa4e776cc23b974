import posixpath

def identity_key(relative_path: str, stem: str) -> str:
    """
    Matching key for an asset across two inventories: parent directory + stem.
    The extension is deliberately left out, so "Show/ep1.mkv" and "Show/ep1.mp4"
    share the key "Show/ep1".

    Paths must already be cleaned and POSIX separated (the collector does this).
    """
    parent = posixpath.dirname(relative_path)
    if parent in ("", "."):
        return stem
    return posixpath.join(parent, stem)
