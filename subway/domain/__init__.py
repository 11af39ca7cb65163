"""Storage-agnostic section chain logic."""

from subway.domain.chain import ChainDiff, SectionChain
from subway.domain.section import Section

__all__ = ["ChainDiff", "Section", "SectionChain"]
