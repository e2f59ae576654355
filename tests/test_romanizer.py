"""
測試拼音對照表與轉寫器

使用 pinyin-data 格式的小型對照表，讓結果不受 pypinyin 版本影響；
另有一組測試使用 pypinyin 內建字典。
"""

import threading
import time

import pytest

from pinyinmatch.romanization.romanizer import Romanizer
from pinyinmatch.romanization.table import RomanizationTable, flatten_syllable

READINGS = {
    "马": "mǎ",
    "克": "kè,kēi",
    "思": "sī,sāi",
    "主": "zhǔ",
    "义": "yì",
    "理": "lǐ",
    "论": "lùn,lún",
    "中": "zhōng,zhòng",
    "国": "guó",
    "绿": "lǜ,lù",
    "语": "yǔ,yù",
    "言": "yán",
}


def make_lines(readings=READINGS):
    lines = ["# pinyin-data sample", ""]
    lines += [f"U+{ord(char):04X}: {reading}  # {char}" for char, reading in readings.items()]
    return lines


def make_table():
    return RomanizationTable.from_lines(make_lines(), source="sample")


def make_romanizer(**kwargs):
    romanizer = Romanizer(loader=make_table, **kwargs)
    romanizer.initialize()
    return romanizer


class TestFlattenSyllable:
    @pytest.mark.parametrize(
        "reading, expected",
        [("zhōng", "zhong"), ("mǎ", "ma"), ("lǜ", "lv"), ("de", "de"), ("guó", "guo")],
    )
    def test_tones_removed(self, reading, expected):
        assert flatten_syllable(reading) == expected


class TestRomanizationTable:
    def test_from_lines(self):
        table = make_table()

        assert len(table) == len(READINGS)
        assert table.get("中") == "zhong"
        assert table.get("论") == "lun"
        assert table.get("绿") == "lv"
        assert "你" not in table

    def test_malformed_lines_are_skipped(self):
        table = RomanizationTable.from_lines([
            "U+4E2D: zhōng,zhòng # 中",
            "U+56FD guó",
            "garbage",
            "U+XYZ1: ma # ?",
        ])
        assert len(table) == 1

    def test_from_file(self, tmp_path):
        path = tmp_path / "pinyin.txt"
        path.write_text("\n".join(make_lines()), encoding="utf-8")

        table = RomanizationTable.from_file(path)

        assert table.get("马") == "ma"
        assert table.source == str(path)

    def test_table_is_read_only(self):
        table = make_table()
        with pytest.raises(TypeError):
            table.mapping["你"] = "ni"


class TestRomanize:
    def setup_method(self):
        self.romanizer = make_romanizer()

    def test_chinese_text(self):
        assert self.romanizer.romanize("马克思主义理论") == "makesizhuyililun"
        assert self.romanizer.romanize("中国") == "zhongguo"

    def test_mixed_text(self):
        assert self.romanizer.romanize("C++语言") == "C++yuyan"

    def test_ascii_passthrough(self):
        assert self.romanizer.romanize("abc123") == "abc123"

    def test_punctuation_passthrough(self):
        assert self.romanizer.romanize("中国，马克思。") == "zhongguo，makesi。"

    def test_unknown_character_passthrough(self):
        assert self.romanizer.romanize("你中国") == "你zhongguo"

    def test_empty(self):
        assert self.romanizer.romanize("") == ""

    def test_callable(self):
        assert self.romanizer("绿") == "lv"


class TestInitialization:
    def test_not_ready_before_initialize(self):
        romanizer = Romanizer(loader=make_table)

        assert romanizer.is_ready is False
        assert romanizer.wait_until_ready(timeout=0) is False
        assert romanizer.romanize("中国") == "中国"

    def test_ready_after_initialize(self):
        events = []
        romanizer = make_romanizer(on_event=events.append)

        assert romanizer.is_ready
        assert romanizer.wait_until_ready()
        assert events[0]["type"] == "loaded"
        assert events[0]["entries"] == len(READINGS)

    def test_background_initialize(self):
        started = threading.Event()
        release = threading.Event()

        def slow_loader():
            started.set()
            release.wait(timeout=5)
            return make_table()

        romanizer = Romanizer(loader=slow_loader)
        future = romanizer.initialize(background=True)
        started.wait(timeout=5)

        assert romanizer.is_ready is False
        assert romanizer.romanize("中国") == "中国"

        release.set()
        assert future.result(timeout=5) is True
        assert romanizer.romanize("中国") == "zhongguo"

    def test_concurrent_initialize_runs_loader_once(self):
        calls = []
        lock = threading.Lock()

        def counting_loader():
            with lock:
                calls.append(1)
            time.sleep(0.05)
            return make_table()

        romanizer = Romanizer(loader=counting_loader)
        barrier = threading.Barrier(8)
        results = []

        def worker():
            barrier.wait()
            romanizer.initialize()
            results.append(romanizer.romanize("中国"))

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join(timeout=5)

        assert len(calls) == 1
        assert results == ["zhongguo"] * 8


class TestLoadFailure:
    def setup_method(self):
        self.calls = 0
        self.events = []

    def _failing_loader(self):
        self.calls += 1
        raise FileNotFoundError("pinyin_data.txt")

    def test_degrades_to_passthrough(self):
        romanizer = Romanizer(loader=self._failing_loader, on_event=self.events.append)
        future = romanizer.initialize()

        assert future.result() is False
        assert romanizer.is_ready is False
        assert isinstance(romanizer.load_error, FileNotFoundError)
        assert romanizer.romanize("马克思") == "马克思"
        assert self.events == [{
            "type": "degraded",
            "source": "TestLoadFailure._failing_loader",
            "exception_type": "FileNotFoundError",
            "exception_message": "pinyin_data.txt",
        }]

    def test_no_automatic_retry(self):
        romanizer = Romanizer(loader=self._failing_loader)
        romanizer.initialize()
        romanizer.initialize()
        romanizer.romanize("马克思")

        assert self.calls == 1

    def test_explicit_retry(self):
        romanizer = Romanizer(loader=self._failing_loader)
        romanizer.initialize()
        romanizer.initialize(force=True)

        assert self.calls == 2

    def test_failing_event_handler_does_not_break_load(self):
        def broken_handler(event):
            raise RuntimeError("boom")

        romanizer = Romanizer(loader=make_table, on_event=broken_handler)
        romanizer.initialize()

        assert romanizer.is_ready


class LoaderAborted(BaseException):
    pass


class TestLoaderAborted:
    def test_waiters_are_released(self):
        def aborting_loader():
            raise LoaderAborted()

        romanizer = Romanizer(loader=aborting_loader)
        with pytest.raises(LoaderAborted):
            romanizer.initialize()

        assert romanizer.wait_until_ready(timeout=1) is False
        assert isinstance(romanizer.load_error, LoaderAborted)
        assert romanizer.romanize("中国") == "中国"

    def test_explicit_retry_after_abort(self):
        attempts = []

        def flaky_loader():
            attempts.append(1)
            if len(attempts) == 1:
                raise LoaderAborted()
            return make_table()

        romanizer = Romanizer(loader=flaky_loader)
        with pytest.raises(LoaderAborted):
            romanizer.initialize()
        romanizer.initialize(force=True)

        assert romanizer.is_ready
        assert romanizer.load_error is None


class TestPypinyinTable:
    """使用 pypinyin 內建字典"""

    def test_default_loader(self):
        romanizer = Romanizer()
        romanizer.initialize()

        assert romanizer.is_ready
        assert romanizer.table.source == "pypinyin"
        assert romanizer.romanize("中国") == "zhongguo"
        assert romanizer.romanize("abc，123") == "abc，123"

    def test_shared_romanizer(self):
        from pinyinmatch.romanization import get_romanizer, romanize
        from pinyinmatch.utils.lazy_imports import check_chinese_dependencies, is_chinese_available

        assert is_chinese_available()
        check_chinese_dependencies()

        assert romanize("马克思") == "makesi"
        assert get_romanizer() is get_romanizer()
        assert get_romanizer().is_ready
