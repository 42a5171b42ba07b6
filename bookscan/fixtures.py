"""Reference book collections for examples and tests."""

from .models import Book, ContentLine

TWENTY_LEAGUES: tuple[Book, ...] = (
    Book(
        title="Twenty Thousand Leagues Under the Sea",
        isbn="9780000528531",
        content=(
            ContentLine(
                page=31,
                line=8,
                text="now simply went on by her own momentum.  The dark-",
            ),
            ContentLine(
                page=31,
                line=9,
                text="ness was then profound; and however good the Canadian's",
            ),
            ContentLine(
                page=31,
                line=10,
                text="eyes were, I asked myself how he had managed to see, and",
            ),
        ),
    ),
)

MULTIPLE_BOOKS: tuple[Book, ...] = (
    Book(
        title="Klara and the Sun",
        isbn="9780593317171",
        content=(
            ContentLine(
                page=4,
                line=10,
                text="And not only could I see every window up to the rooftop, I",
            ),
            ContentLine(
                page=5,
                line=12,
                text="and disappointed. But once we'd seated ourselves on the Striped Sofa,",
            ),
        ),
    ),
    Book(
        title="Because Internet",
        isbn="9780735210936",
        content=(
            ContentLine(
                page=71,
                line=22,
                text="An article reminiscing about the early-2000s teen internet high-",
            ),
            ContentLine(
                page=23,
                line=3,
                text="AIM shut down, a tech culture reporter recalled how in middle",
            ),
        ),
    ),
)

FIXTURES: dict[str, tuple[Book, ...]] = {
    "twenty-leagues": TWENTY_LEAGUES,
    "multiple-books": MULTIPLE_BOOKS,
}
