"""Exceptions raised while generating the emoji catalogue."""


class GenerationError(Exception):
    """Base class for all generator failures."""

    pass


class DuplicateVariantError(GenerationError):
    """An attribute key was inserted twice into the same family."""

    def __init__(self, identifier: str, kind: object):
        self.identifier = identifier
        self.kind = kind
        super().__init__(f"Duplicate variant {kind} in family {identifier}")


class UnfinalizedFamilyError(GenerationError):
    """A tree-dependent query was made before the family was finalized."""

    def __init__(self, identifier: str):
        self.identifier = identifier
        super().__init__(f"Family {identifier} has not been finalized")


class MissingDefaultVariantError(GenerationError):
    """A family has no variants to pick a default from."""

    def __init__(self, identifier: str):
        self.identifier = identifier
        super().__init__(f"Family {identifier} has no variants")


class InconsistentTreeError(GenerationError):
    """A qualified tree cannot be projected into a declaration."""

    pass


class DuplicateConstantError(GenerationError):
    """Two different emoji resolved to the same constant in one subgroup."""

    def __init__(self, identifier: str, subgroup: str):
        self.identifier = identifier
        self.subgroup = subgroup
        super().__init__(f"Constant {identifier} defined twice in {subgroup}")


class FeedFetchError(GenerationError):
    """Downloading a remote resource failed."""

    pass
