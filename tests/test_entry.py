import orjson

from cigarkit.entry import main


def test_stats(capsys):
    assert main(["stats", "10M2I3D5M", "5S10M5S"]) == 0
    res = orjson.loads(capsys.readouterr().out)

    assert res[0] == {
        "cigar": "10M2I3D5M",
        "runs": [[10, "M"], [2, "I"], [3, "D"], [5, "M"]],
        "ref_len": 18,
        "read_len": 17,
        "soft_clip_start": 0,
        "soft_clip_end": 0,
        "is_reference": False,
    }
    assert res[1]["soft_clip_start"] == 5
    assert res[1]["soft_clip_end"] == 5


def test_stats_lenient(capsys):
    assert main(["stats", "10M5"]) == 1

    assert main(["stats", "--lenient", "--indent-json", "10M5"]) == 0
    res = orjson.loads(capsys.readouterr().out)
    assert res[0]["cigar"] == "10M"
    assert res[0]["ref_len"] == 10


def test_join(capsys):
    assert main(["join", "5M", "3M2I", "1I4M"]) == 0
    assert capsys.readouterr().out == "8M3I4M\n"


def test_alleles(capsys):
    assert main(["alleles", "AC:AC", "G:T", "AC:AC"]) == 0
    assert capsys.readouterr().out == "2M1M2M\n"

    assert main(["alleles", "--coalesce", "AC:AC", "G:T", "AC:AC"]) == 0
    assert capsys.readouterr().out == "5M\n"

    assert main(["alleles", "A:-", "-:TT"]) == 0
    assert capsys.readouterr().out == "1D2I\n"

    assert main(["alleles", "ACT"]) == 1
