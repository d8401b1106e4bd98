"""Credential set name validation.

Names become file names in the file system store, so they are restricted
to letters, digits, hyphens and underscores. A period is rejected
explicitly with its own message because it is the most common mistake
(``this.isabadname``), and it would otherwise collide with the store's
file extension.
"""

import re

from bundle_creds.exceptions import NameInvalidError

_NAME_PATTERN = re.compile(r"[A-Za-z0-9_-]+")


def validate_name(name: str) -> str:
    """Check that a credential set name is acceptable.

    The name is returned exactly as given; validation never changes case.

    Args:
        name: Proposed credential set name

    Returns:
        The unchanged name

    Raises:
        NameInvalidError: If the name is empty, contains a period, or has
            any character other than letters, digits, '-' and '_'

    Example:
        >>> validate_name("HELLO")
        'HELLO'
    """
    if not name:
        raise NameInvalidError("credential set name cannot be empty", name=name)

    if "." in name:
        raise NameInvalidError(f"invalid credential set name '{name}': names cannot contain '.'", name=name)

    if not _NAME_PATTERN.fullmatch(name):
        raise NameInvalidError(
            f"invalid credential set name '{name}': only letters, digits, '-' and '_' are allowed",
            name=name,
        )

    return name
