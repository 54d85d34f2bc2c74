import numpy as np
import pandas as pd
import pandas.testing as pd_test
import pytest

from modepoly import Polynomial
from modepoly.modality import Constant, Multimodal, Nonmodal, Unimodal, Zero
from modepoly.show import describe, four_letter_code, summary


@pytest.mark.parametrize("modality, code, text", [
    (Unimodal(0.5), ' :) ', 'Unimodal(0.5)'),
    (Zero(), 'zero', 'Identically zero'),
    (Constant(), 'cons', 'Constant'),
    (Nonmodal(), 'none', 'Without extrema'),
    (Multimodal(), 'mult', 'Multiple extrema'),
])
def test_display(modality, code, text):
    assert four_letter_code(modality) == code
    assert len(four_letter_code(modality)) == 4
    assert describe(modality) == text


def test_not_a_modality():
    with pytest.raises(ValueError):
        four_letter_code(0.5)
    with pytest.raises(ValueError):
        describe(None)


def test_summary():
    polys = [Polynomial(), Polynomial(5), Polynomial(0, 1), Polynomial(0, 1, -1), Polynomial(0, 63, -150, 100)]
    pd_test.assert_frame_equal(
        summary(polys),
        pd.DataFrame(
            columns=['poly', 'deg', 'code', 'mode'],
            data=[
                ('0', -1, 'zero', np.nan),
                ('5', 0, 'cons', np.nan),
                ('p', 1, 'none', np.nan),
                ('-p^2 + p', 2, ' :) ', 0.5),
                ('100p^3 - 150p^2 + 63p', 3, 'mult', np.nan),
            ],
        ),
    )


def test_summary_interval():
    frame = summary([Polynomial(0, 0, 1).with_variable_name('x')], a=-1.0, b=1.0)
    assert list(frame['poly']) == ['x^2']
    assert list(frame['code']) == [' :) ']
    assert frame['mode'][0] == pytest.approx(0.0)
