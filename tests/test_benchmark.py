import pytest

from algolabs.benchmark import BenchmarkResult, format_report, main, read_data, run_benchmarks


def test_read_data(tmp_path):
    path = tmp_path / "data.txt"
    path.write_text("3\n3 1 2\n", encoding="utf-8")
    assert read_data(path) == (3, [3, 1, 2])


def test_read_data_mismatch_and_bad_token(tmp_path):
    path = tmp_path / "data.txt"
    path.write_text("5\n4 2 x 9\n", encoding="utf-8")
    declared, values = read_data(path)
    assert declared == 5
    assert values == [4, 2]


def test_read_data_empty(tmp_path):
    path = tmp_path / "data.txt"
    path.write_text("", encoding="utf-8")
    assert read_data(path) == (0, [])


def test_read_data_missing(tmp_path):
    with pytest.raises(OSError):
        read_data(tmp_path / "nope.txt")


def test_run_benchmarks(tmp_path):
    out = tmp_path / "sorted.txt"
    values = [9, -4, 7, 7, 0, 3]
    results = run_benchmarks(values, 2, out)
    assert len(results) == 5
    assert results[0].name == "手写快速排序"
    assert all(r.all_ok for r in results)
    assert all(r.data_size == len(values) for r in results)
    assert all(r.average_ms >= 0 for r in results)
    assert out.read_text(encoding="utf-8") == " ".join(map(str, sorted(values))) + "\n"
    assert values == [9, -4, 7, 7, 0, 3]


def test_run_benchmarks_rejects_zero_runs(tmp_path):
    with pytest.raises(ValueError):
        run_benchmarks([1, 2], 0, tmp_path / "x.txt")


def test_format_report():
    results = [
        BenchmarkResult("归并排序", 1.5, True, 10),
        BenchmarkResult("堆排序", 2.0, False, 10),
    ]
    report = format_report(results, 10)
    lines = report.splitlines()
    assert "10 次平均" in lines[1]
    assert lines[2] == "归并排序: 1.500 毫秒 | 数据规模: 10 | 验证: 成功"
    assert lines[3] == "堆排序: 2.000 毫秒 | 数据规模: 10 | 验证: 失败"


def test_main(tmp_path, capsys):
    data = tmp_path / "data.txt"
    data.write_text("4\n5 3 8 1\n", encoding="utf-8")
    out = tmp_path / "sorted.txt"
    code = main([str(data), "-o", str(out), "-r", "1"])
    assert code == 0
    assert out.read_text(encoding="utf-8") == "1 3 5 8\n"
    printed = capsys.readouterr().out
    assert "读取数据数量: 4" in printed
    assert "三数取中" in printed
    assert "警告" not in printed


def test_main_warns_on_mismatch(tmp_path, capsys):
    data = tmp_path / "data.txt"
    data.write_text("7\n2 1\n", encoding="utf-8")
    code = main([str(data), "-o", str(tmp_path / "s.txt"), "-r", "1"])
    assert code == 0
    assert "使用实际读取数量: 2" in capsys.readouterr().out


def test_main_missing_file(tmp_path):
    assert main([str(tmp_path / "missing.txt"), "-r", "1"]) == 1