"""End to end scenarios combining sources, adapters and consumers."""

import lazychain as lc


def test_zigzag() -> None:
    """Test drawing a zigzag line in a 4x9 grid."""
    expected = [
        [1, 0, 0, 1, 0, 0, 1, 0, 0],
        [1, 0, 1, 1, 0, 1, 1, 0, 1],
        [1, 1, 0, 1, 1, 0, 1, 1, 0],
        [1, 0, 0, 1, 0, 0, 1, 0, 0],
    ]
    grid = [[0] * len(expected[0]) for _ in expected]

    def _draw(point: tuple[int, int], _idx: int) -> None:
        y, x = point
        grid[y][x] = 1

    down = (1, 0)
    up_right = (-1, 1)
    steps = lc.iter([down, up_right]).stretch(len(grid) - 1).cycle()
    (
        lc.chain(lc.once((0, 0)), steps)
        .accumulate(lambda acc, step: (acc[0] + step[0], acc[1] + step[1]))
        .take_while(lambda point, _: point[1] < len(grid[0]))
        .for_each(_draw)
    )
    assert grid == expected


def test_space_rate_per_line() -> None:
    """Test the rate of spaces per line after doubling each char and wrapping lines at 8."""
    text = "Hi hey hello hola bonjour"
    doubled = "".join(ch * 2 for ch in text)
    lines = [doubled[i : i + 8] for i in range(0, len(doubled), 8)]
    expected = [line.count(" ") / len(line) for line in lines]

    result = (
        lc.iter(text)
        .stretch(2)
        .chunks(8)
        .map(lambda line, _: lc.iter(line).rate(lambda ch: ch == " "))
        .collect()
    )
    assert result == expected


def test_unique_words() -> None:
    """Test deduplicating and splitting a list of words."""
    words = lc.iter("the quick brown fox jumps over the lazy dog".split())
    short, long = words.unique().partition(lambda word, _: len(word) <= 3)
    assert short == ["the", "fox", "dog"]
    assert long == ["quick", "brown", "jumps", "over", "lazy"]
    initials = words.unique_by(lambda word: word[0]).map(lambda word, _: word[0])
    assert "".join(initials) == "tqbfjold"


def test_grid_coordinates() -> None:
    """Test nest and filter build the diagonal of a grid."""
    diagonal = lc.range(4).nest(4).filter(lambda cell, _: cell[0] == cell[1])
    assert diagonal.map(lambda cell, _: cell[0]).collect() == [0, 1, 2, 3]
    assert lc.range(3).nest(3).count() == 9
