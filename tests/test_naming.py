import pytest

import panda3d.core as p3d

from ashikhminlut import naming


@pytest.mark.parametrize('value, expected', [
    (3.0, '3'),
    (10.0, '10'),
    (0.25, '0.25'),
    (0.0, '0'),
    (-0.5, '-0.5'),
    (1.123456789, '1.123457'),
])
def test_format_shininess(value, expected):
    assert naming.format_shininess(value) == expected


@pytest.mark.parametrize('text, expected', [
    ('3', 3.0),
    (' 0.5\n', 0.5),
    ('-0.25', -0.25),
    ('1e2', 100.0),
])
def test_parse_shininess(text, expected):
    assert naming.parse_shininess(text) == expected


@pytest.mark.parametrize('text', ['', 'abc', '1,5', 'nan', 'inf'])
def test_parse_shininess_invalid(text):
    with pytest.raises(naming.ShininessParseError):
        naming.parse_shininess(text)


def test_output_filename():
    assert naming.output_filename('halfVectorSampling', 3.0, 2.0) == 'halfVectorSampling [3,2].png'
    assert naming.output_filename('lut', 0.5, 10.0, 2) == 'lut [0.5,10] 2.png'


def test_find_free_path(outdir):
    first = naming.find_free_path(outdir, 'lut', 3.0, 2.0)
    assert first.get_basename() == 'lut [3,2].png'
    assert not first.exists()

    first.touch()
    second = naming.find_free_path(outdir, 'lut', 3.0, 2.0)
    assert second.get_basename() == 'lut [3,2] 1.png'

    second.touch()
    third = naming.find_free_path(outdir, 'lut', 3.0, 2.0)
    assert third.get_basename() == 'lut [3,2] 2.png'


def test_find_free_path_from_os_string(tmp_path):
    path = naming.find_free_path(str(tmp_path), 'lut', 1.0, 1.0)
    assert isinstance(path, p3d.Filename)
    assert path.get_dirname() == p3d.Filename.from_os_specific(str(tmp_path)).get_fullpath()
