from kata_toolkit.core.dominoes.domino_row import can_dominoes_make_row, validate_dominoes
from kata_toolkit.core.io.load_input import load_input


def test_dominoes_examples():
    assert can_dominoes_make_row([(0, 1), (1, 1)]) is True
    assert can_dominoes_make_row([(1, 1), (2, 2), (1, 5), (5, 6), (6, 3)]) is False
    assert can_dominoes_make_row([(1, 3), (2, 3), (1, 4), (2, 4), (1, 5), (2, 5)]) is True
    assert (
        can_dominoes_make_row(
            [(0, 0), (0, 1), (1, 1), (0, 2), (1, 2), (2, 2), (0, 3), (1, 3), (2, 3), (3, 3)]
        )
        is False
    )


def test_dominoes_edge_cases():
    assert can_dominoes_make_row([]) is True
    assert can_dominoes_make_row([(4, 4)]) is True
    # even degrees everywhere but two separate loops
    assert can_dominoes_make_row([(1, 2), (2, 1), (3, 4), (4, 3)]) is False


def test_validate_dominoes_from_file():
    raw = load_input("examples/dominoes-row.yaml")
    tiles, errors = validate_dominoes(raw)
    assert errors == []
    assert tiles is not None
    assert len(tiles) == 6
    assert can_dominoes_make_row(tiles) is True


def test_validate_dominoes_bad_shapes():
    tiles, errors = validate_dominoes([[1, 2], [3], "x", [True, 1]])
    assert tiles is None
    assert [e.path for e in errors] == ["dominoes[1]", "dominoes[2]", "dominoes[3]"]
    assert all(e.code == "E_INVALID_DOMINO" for e in errors)

    tiles, errors = validate_dominoes({"a": 1})
    assert tiles is None
    assert errors[0].code == "E_INVALID_TYPE"
