"""Per-tool policy records for the sandboxed PATH, plus the base table."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PathConfig:
    # Whether to create the symlink in the new PATH for this tool.
    allow_symlink: bool

    # Whether to log about usages of this tool.
    log_usage: bool

    # Whether to exit with an error instead of invoking the underlying tool.
    deny_execution: bool

    # Whether we use a linux-specific prebuilt for this tool. On darwin the
    # host executable is allowed instead.
    platform_restricted: bool = False


ALLOWED = PathConfig(allow_symlink=True, log_usage=False, deny_execution=False)

FORBIDDEN = PathConfig(allow_symlink=False, log_usage=True, deny_execution=True)

LOG = PathConfig(allow_symlink=True, log_usage=True, deny_execution=False)

# Used for any tool not listed below. Keeps the symlink but logs and errors
# when the tool is run.
MISSING = PathConfig(allow_symlink=True, log_usage=True, deny_execution=True)

PLATFORM_RESTRICTED = PathConfig(
    allow_symlink=False,
    log_usage=True,
    deny_execution=True,
    platform_restricted=True,
)

PRESETS: dict[str, PathConfig] = {
    "allowed": ALLOWED,
    "forbidden": FORBIDDEN,
    "log": LOG,
    "missing": MISSING,
    "platform_restricted": PLATFORM_RESTRICTED,
}

_ANDROID_BINUTILS = (
    "addr2line", "ar", "as", "c++filt", "dwp", "elfedit", "gcc", "gcc-ar",
    "gcc-nm", "gcc-ranlib", "gcov", "gcov-tool", "gprof", "ld", "ld.bfd",
    "ld.gold", "nm", "objcopy", "objdump", "ranlib", "readelf", "size",
    "strings", "strip",
)

# Base table before any platform overrides. Treat as read-only; the registry
# always works on a copy.
CONFIGURATION: dict[str, PathConfig] = {
    "bash": ALLOWED,
    "bindgen": ALLOWED,
    "dd": ALLOWED,
    "diff": ALLOWED,
    "dlv": ALLOWED,
    "expr": ALLOWED,
    "fuser": ALLOWED,
    "getopt": ALLOWED,
    "git": ALLOWED,
    "hexdump": ALLOWED,
    "install": ALLOWED,
    "jar": ALLOWED,
    "java": ALLOWED,
    "javap": ALLOWED,
    "lsof": ALLOWED,
    "openssl": ALLOWED,
    "pahole": ALLOWED,
    "perl": ALLOWED,
    "pstree": ALLOWED,
    "realpath": ALLOWED,
    "rsync": ALLOWED,
    "rustc": ALLOWED,
    "sh": ALLOWED,
    "stubby": ALLOWED,
    "tr": ALLOWED,
    "unzip": ALLOWED,
    "zip": ALLOWED,

    **{f"x86_64-linux-android-{tool}": ALLOWED for tool in _ANDROID_BINUTILS},

    # Host toolchain is removed. In-tree toolchain should be used instead.
    "ar": FORBIDDEN,
    "as": FORBIDDEN,
    "cc": FORBIDDEN,
    "clang": FORBIDDEN,
    "clang++": FORBIDDEN,
    "gcc": FORBIDDEN,
    "g++": FORBIDDEN,
    "ld": FORBIDDEN,
    "ld.bfd": FORBIDDEN,
    "ld.gold": FORBIDDEN,
    "pkg-config": FORBIDDEN,

    # Toybox tools that only work on Linux.
    "pgrep": PLATFORM_RESTRICTED,
    "pkill": PLATFORM_RESTRICTED,
    "ps": PLATFORM_RESTRICTED,
}
