class RegistryError(Exception):
    """Base class for registry-level failures."""


class NodeValidationError(RegistryError):
    """Registration is missing a node id or a public key."""


class NodeConflictError(RegistryError):
    """Node id already registered and the duplicate policy is "reject"."""


class PrivateKeyIssueError(RegistryError):
    """A private key was generated but could not be exported."""
