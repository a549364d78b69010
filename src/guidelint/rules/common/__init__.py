"""Language-independent rules."""

from guidelint.rules.common.generated import GeneratedFileRule

__all__ = ["GeneratedFileRule"]
