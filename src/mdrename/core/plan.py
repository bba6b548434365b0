"""Pure mapping from original filenames to canonical, sequence-numbered names"""

from mdrename.core.models import RenameEntry
from mdrename.core.utils.collate import collate
from mdrename.core.utils.slug import slugify, strip_prefix


MD_EXTENSION = '.md'
PREFIX_WIDTH = 4


def canonical_name(name: str, position: int, keep_all_digits: bool = False) -> str:
    """Return the canonical 'NNNN-slug.md' form of name at 1-based position."""
    base = strip_prefix(name.lower())
    base = base[:-len(MD_EXTENSION)]
    slug = slugify(base, keep_all_digits=keep_all_digits)
    return f"{position:0{PREFIX_WIDTH}d}-{slug}{MD_EXTENSION}"


def plan_renames(names, keep_all_digits: bool = False) -> list[RenameEntry]:
    """Map qualifying names to RenameEntry items in collated order.

    Names that do not end with '.md' are ignored.
    """
    qualifying = [n for n in names if n.endswith(MD_EXTENSION)]
    return [
        RenameEntry(source=name, target=canonical_name(name, i, keep_all_digits), position=i)
        for i, name in enumerate(collate(qualifying), start=1)
    ]
