"""Name derivations for namespaced bundle identifiers.

Every helper in this module is a pure function of the qualified name it is
given (e.g. ``Napse\\DemoBundle``). None of them validate their input: a name
without a separator simply degenerates to single segment values. Validation
happens in :meth:`bundlemaker.config.BundleConfig.from_name`.
"""

from __future__ import annotations

import re

__all__ = [
    "NAMESPACE_SEPARATOR",
    "generate_package_id",
    "generate_path_segment",
    "parse_name_parts",
    "pascal_case_to_kebab_case",
    "split_qualified_name",
]


NAMESPACE_SEPARATOR = "\\"

_INTERIOR_UPPERCASE = re.compile(r"(?<!^)[A-Z]")


def pascal_case_to_kebab_case(value: str) -> str:
    """Convert ``value`` from PascalCase to kebab-case.

    A hyphen is inserted before every uppercase letter except a leading one.
    Runs of capitals are not collapsed, so ``"ABBundle"`` becomes
    ``"a-b-bundle"``.
    """

    return _INTERIOR_UPPERCASE.sub(r"-\g<0>", value).lower()


def split_qualified_name(qualified_name: str, separator: str = NAMESPACE_SEPARATOR) -> list[str]:
    return qualified_name.split(separator)


def generate_package_id(qualified_name: str, separator: str = NAMESPACE_SEPARATOR) -> str:
    """Return the Composer package name, e.g. ``napse/demo-bundle``.

    Only the first (vendor) and last (class) segments are used; any segments
    in between are ignored.
    """

    parts = split_qualified_name(qualified_name, separator)
    vendor = parts[0].lower()
    package = pascal_case_to_kebab_case(parts[-1])
    return f"{vendor}/{package}"


def parse_name_parts(qualified_name: str, separator: str = NAMESPACE_SEPARATOR) -> tuple[str, str]:
    """Split ``qualified_name`` into ``(namespace, class_name)``.

    The namespace keeps the class segment, so it is identical to the input:
    ``Napse\\DemoBundle`` yields ``("Napse\\DemoBundle", "DemoBundle")``.
    """

    parts = split_qualified_name(qualified_name, separator)
    class_name = parts[-1]
    namespace = separator.join([*parts[:-1], class_name])
    return namespace, class_name


def generate_path_segment(qualified_name: str, separator: str = NAMESPACE_SEPARATOR) -> str:
    """Return the directory name for the bundle, e.g. ``napse-demo-bundle``.

    Separators are removed before the kebab-case conversion, so the whole
    joined name is converted at once rather than segment by segment.
    """

    return pascal_case_to_kebab_case(qualified_name.replace(separator, ""))
