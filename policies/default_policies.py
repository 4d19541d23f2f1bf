"""Declarative policy descriptions.

These mirror the presets in core/path_config.py and serve as human-readable
documentation of every regime a tool in the sandboxed PATH can fall under.
"""

POLICIES = {
    "allowed": {
        "description": "Pass the host tool through unchanged.",
        "rules": [
            "A symlink to the host executable is created in the sandboxed PATH",
            "Invocations are not logged",
            "Used for shells, VCS, JDK tools and the prebuilt android binutils",
        ],
    },
    "forbidden": {
        "description": "Host toolchain is removed; the in-tree toolchain must be used.",
        "rules": [
            "No symlink is created",
            "Any invocation is logged and fails",
            "Covers cc/gcc/clang, the host linkers and pkg-config",
        ],
    },
    "log": {
        "description": "Pass the host tool through but record every use.",
        "rules": [
            "A symlink to the host executable is created",
            "Every invocation is logged; execution proceeds",
        ],
    },
    "missing": {
        "description": "Fallback for any tool not listed in the table.",
        "rules": [
            "A symlink is still created so the failure is visible",
            "Any invocation is logged and fails",
        ],
    },
    "platform_restricted": {
        "description": "Toybox tools with a linux-only prebuilt.",
        "rules": [
            "On linux: no symlink, invocations logged and rejected",
            "On darwin: replaced by the allowed regime so the host tool is used",
        ],
    },
}
