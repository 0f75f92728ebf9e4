import pytest

from formatreaders.fortran import FortranFile


def test_read_write_fortran_file(tmp_path):
    path = tmp_path / "test_fortran_file_optimized.dat"
    path.write_text("1.0 2.0 3.0\n4.0   5.0 \n")

    fortran_file = FortranFile()
    fortran_file.data = [1.0, 2.0, 3.0, 4.0, 5.0]
    fortran_file.write(path)

    read_file = FortranFile.read(path)
    assert read_file.data == fortran_file.data


def test_read_multiple_values_per_line(tmp_path):
    path = tmp_path / "values.dat"
    path.write_text("1.0 2.0 3.0\n4.0   5.0 \n")
    assert FortranFile.read(path).data == [1.0, 2.0, 3.0, 4.0, 5.0]


def test_invalid_tokens_are_skipped_with_warning(tmp_path, capsys):
    path = tmp_path / "bad.dat"
    path.write_text("1.5 abc 2\n")
    result = FortranFile.read(path)
    assert result.data == [1.5, 2.0]
    assert "Uyarı: Geçersiz sayı formatı bulundu: abc" in capsys.readouterr().err


def test_write_uses_plain_decimal_notation(tmp_path):
    path = tmp_path / "out.dat"
    FortranFile(data=[1.0, 2.5, 1e20, -0.5]).write(path)
    assert path.read_text() == "1\n2.5\n100000000000000000000\n-0.5\n"


def test_read_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        FortranFile.read(tmp_path / "missing.dat")


def test_empty_file_has_no_data(tmp_path):
    path = tmp_path / "empty.dat"
    path.write_text("")
    assert FortranFile.read(path).data == []