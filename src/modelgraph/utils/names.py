"""Model identifier helpers.

A model identifier is namespace-qualified as ``namespace.name``. Identifiers
without a dot belong to the default namespace, represented by ``""``.
"""


def split_identifier(identifier: str) -> tuple[str, str]:
    """Split a model identifier into ``(namespace, name)``.

    Only the first dot separates the namespace, so nested names stay intact.

    Examples:
        >>> split_identifier("Users")
        ('', 'Users')
        >>> split_identifier("Blog.Posts")
        ('Blog', 'Posts')
        >>> split_identifier("Blog.Admin.Posts")
        ('Blog', 'Admin.Posts')
    """
    namespace, dot, name = identifier.partition(".")
    if not dot:
        return "", identifier
    return namespace, name


def qualify(namespace: str, name: str) -> str:
    """Build the identifier for ``name`` inside ``namespace``."""
    if not namespace:
        return name
    return f"{namespace}.{name}"


def strip_namespace(identifier: str, namespace: str) -> str:
    """Remove ``namespace.`` from the front of an identifier if present."""
    if namespace and identifier.startswith(f"{namespace}."):
        return identifier[len(namespace) + 1:]
    return identifier


def validate_identifier(identifier: str) -> str:
    """Reject identifiers that cannot name a model node.

    ``:`` is reserved for generated node ids such as the legend's.

    Raises:
        ValueError: If the identifier is empty, starts or ends with a dot,
                    or contains a colon
    """
    if not identifier or identifier.startswith(".") or identifier.endswith(".") or ":" in identifier:
        raise ValueError(f"invalid model identifier: {identifier!r}")
    return identifier
