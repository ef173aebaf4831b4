import io

from asset_tracker.services.record_store import EXPORT_HEADER, export_assets, write_records

from conftest import make_asset

SPACER = " " * 10


def test_write_records_keeps_insertion_order(sweden_computer, usa_phone):
    stream = io.StringIO()

    count = write_records([usa_phone, sweden_computer], stream)

    assert count == 2
    assert stream.getvalue().splitlines() == [
        EXPORT_HEADER,
        f"Phone,{SPACER},Apple,iPhone,USA,06/15/2023,800,USD,800",
        f"Computer,{SPACER},Dell,XPS,Sweden,01/01/2023,1,000,SEK,10,630",
    ]


def test_write_records_without_assets_writes_header_only():
    stream = io.StringIO()

    assert write_records([], stream) == 0
    assert stream.getvalue() == EXPORT_HEADER + "\n"


def test_export_assets_writes_utf8_file(tmp_path, sweden_computer, usa_phone):
    target = tmp_path / "assets.csv"

    result = export_assets([sweden_computer, usa_phone], target)

    assert result.ok
    assert result.records == 2
    assert result.error is None
    assert result.path == target
    raw = target.read_bytes()
    assert not raw.startswith(b"\xef\xbb\xbf")
    assert raw.decode("utf-8") == (
        "Type,Brand,Model,Office,Purchase Date,Price in USD,Currency,Local Price\n"
        f"Computer,{SPACER},Dell,XPS,Sweden,01/01/2023,1,000,SEK,10,630\n"
        f"Phone,{SPACER},Apple,iPhone,USA,06/15/2023,800,USD,800\n"
    )


def test_export_assets_overwrites_previous_file(tmp_path, usa_phone):
    target = tmp_path / "assets.csv"
    target.write_text("stale\nstale\nstale\n", encoding="utf-8")

    export_assets([usa_phone], target)

    assert target.read_text(encoding="utf-8").splitlines()[0] == EXPORT_HEADER
    assert len(target.read_text(encoding="utf-8").splitlines()) == 2


def test_export_assets_reports_io_failure(tmp_path, sweden_computer):
    target = tmp_path / "missing" / "assets.csv"

    result = export_assets([sweden_computer], target)

    assert not result.ok
    assert result.records == 0
    assert result.error
    assert not target.exists()


def test_export_assets_reports_unencodable_text(tmp_path, usa_phone):
    broken = make_asset(brand="Dell\udcff")
    target = tmp_path / "assets.csv"

    result = export_assets([usa_phone, broken], target)

    assert not result.ok
    assert "surrogates not allowed" in result.error
