from spacegeom.formatting import fnum, planestr, pstr, vecstr


def test_fnum_integers_print_without_decimals():
    assert fnum(2.0) == "2"
    assert fnum(-3.0) == "-3"
    assert fnum(0.0) == "0"
    assert fnum(-0.0) == "0"
    assert fnum(4.0000000000001) == "4"


def test_fnum_fractions_print_three_places():
    assert fnum(2.5) == "2.500"
    assert fnum(-1.0 / 3.0) == "-0.333"
    assert fnum(2.5, places=1) == "2.5"


def test_pstr():
    assert pstr((1, 2, 3)) == "(1.00, 2.00, 3.00)"
    assert pstr((-0.0, 0.5, -1.25)) == "(0.00, 0.50, -1.25)"


def test_vecstr_folds_signs():
    assert vecstr((1, 2, 3)) == "1.00i + 2.00j + 3.00k"
    assert vecstr((1, -2, 3)) == "1.00i - 2.00j + 3.00k"
    assert vecstr((-1, 0, -0.5)) == "-1.00i + 0.00j - 0.50k"
    assert vecstr((-0.0, -0.0, -1.0)) == "0.00i + 0.00j - 1.00k"


def test_planestr():
    assert planestr(1, 1, 1, -6) == "1x + 1y + 1z + -6 = 0"
    assert planestr(0.5, 0, 2, 0) == "0.500x + 0y + 2z + 0 = 0"
