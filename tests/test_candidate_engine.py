"""
測試拼音候選詞引擎
"""

from pinyinmatch.candidates.engine import MAX_CANDIDATES, CandidateEngine


class TestCandidateEngine:
    def setup_method(self):
        self.engine = CandidateEngine()

    def test_exact_match_sorted_by_frequency(self):
        candidates = self.engine.get_candidates("ma")
        assert candidates[:3] == ["吗", "妈", "马"]

    def test_case_insensitive(self):
        assert self.engine.get_candidates("NIHAO")[0] == "你好"

    def test_empty_input(self):
        assert self.engine.get_candidates("") == []

    def test_prefix_fill_when_few_exact(self):
        # "xue" 沒有精確匹配，補上 xuexiao / xuesheng 開頭的詞（短拼音優先）
        candidates = self.engine.get_candidates("xue")
        assert candidates == ["学校", "学笑", "学效", "学生", "学声"]

    def test_prefix_fill_shorter_keys_first(self):
        candidates = self.engine.get_candidates("zhong")
        # 精確匹配已超過 5 個，不補前綴
        assert "中国" not in candidates

        assert self.engine.get_candidates("xiao") == ["小姐姐", "小朋友"]

    def test_segmentation(self):
        candidates = self.engine.get_candidates("nihaoma")
        # ni + (hao + ma)
        assert candidates[0] == "你好吗"
        assert "你吗" not in candidates

    def test_segmentation_combines_known_syllables(self):
        engine = CandidateEngine({"wo": ["我"], "ai": ["爱"]})
        assert engine.get_candidates("woai") == ["我爱"]

    def test_capped(self):
        engine = CandidateEngine({"a": [f"字{i}" for i in range(50)]})
        assert len(engine.get_candidates("a")) == MAX_CANDIDATES

    def test_update_frequency_changes_order(self):
        assert self.engine.get_candidates("laoshi")[0] == "老师"

        for _ in range(21):
            assert self.engine.update_frequency("laoshi", "老实")

        assert self.engine.get_candidates("laoshi")[0] == "老实"
        assert self.engine.get_frequency("laoshi", "老实") == 980 + 21

    def test_update_frequency_unknown(self):
        assert self.engine.update_frequency("laoshi", "不存在") is False
        assert self.engine.update_frequency("zzz", "老师") is False

    def test_add_word(self):
        self.engine.add_word("ceshi", "测试", frequency=5)
        self.engine.add_word("ceshi", "测试", frequency=99)

        assert self.engine.get_candidates("ceshi")[0] == "测试"
        assert self.engine.get_frequency("ceshi", "测试") == 5

    def test_associations(self):
        assert self.engine.get_associations("你")[0] == "好"
        assert self.engine.get_associations("未知") == []
