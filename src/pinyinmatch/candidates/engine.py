"""
拼音候選詞引擎

拼音 -> 候選詞（依使用頻率排序）。
使用者選字時頻率 +1，只影響之後同一拼音的排序；頻率不會衰減，詞不會被刪除。
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Dict, Iterable, List, Mapping, Optional

from pinyinmatch.utils.logger import get_logger

MAX_CANDIDATES = 20
PREFIX_FILL_THRESHOLD = 5
MAX_SEGMENT_RESULTS = 10


@dataclass
class CandidateWord:
    word: str
    frequency: int = 0


COMMON_WORDS: Dict[str, List[str]] = {
    # 單字
    "ni": ["你", "泥", "倪", "尼", "呢", "妮", "逆", "匿", "拟", "腻"],
    "hao": ["好", "号", "浩", "豪", "耗", "郝", "毫", "嚎", "壕", "蒿"],
    "ma": ["吗", "妈", "马", "麻", "码", "蚂", "骂", "嘛", "玛", "蟆"],
    "de": ["的", "得", "地", "德", "底"],
    "wo": ["我", "窝", "沃", "握", "斡", "卧", "渥", "蜗", "涡", "挝"],
    "shi": ["是", "时", "十", "使", "世", "市", "师", "诗", "式", "士", "事", "史", "识", "石", "拾", "食", "始", "试", "视"],
    "bu": ["不", "部", "步", "布", "补", "捕", "卜", "哺", "埠", "簿"],
    "zai": ["在", "再", "载", "栽", "灾", "宰", "哉", "仔", "崽"],
    "ren": ["人", "任", "认", "仁", "忍", "韧", "刃", "纫", "壬", "饪"],
    "you": ["有", "由", "又", "右", "油", "游", "友", "优", "尤", "忧", "幼", "诱", "悠", "邮", "犹", "佑", "釉"],
    "he": ["和", "何", "合", "河", "核", "盒", "贺", "喝", "赫", "荷", "鹤", "褐"],
    "ta": ["他", "她", "它", "踏", "塌", "塔", "獭", "挞", "蹋", "榻"],
    "men": ["们", "门", "闷", "扪", "焖", "懑"],
    "zhe": ["这", "着", "者", "折", "遮", "哲", "蔗", "锗", "褶", "辙"],
    "ge": ["个", "各", "格", "歌", "哥", "割", "革", "葛", "隔", "戈", "鸽", "搁", "疙", "咯"],
    "zhong": ["中", "种", "重", "众", "终", "钟", "忠", "衷", "肿", "仲", "踵"],
    "guo": ["国", "过", "果", "郭", "锅", "裹", "帼", "椁", "蝈", "虢"],
    "shuo": ["说", "硕", "朔", "烁", "蒴", "槊", "铄"],
    "dou": ["都", "斗", "豆", "逗", "兜", "抖", "陡", "痘", "窦", "蚪"],
    "hui": ["会", "回", "挥", "汇", "灰", "绘", "贿", "惠", "毁", "慧", "秽", "烩", "讳", "诲"],
    "yao": ["要", "药", "遥", "腰", "瑶", "摇", "尧", "窑", "谣", "姚", "咬", "邀", "爻", "吆"],
    "jiu": ["就", "九", "酒", "久", "救", "旧", "究", "纠", "舅", "灸", "疚", "鸠", "咎"],
    "xiang": ["想", "向", "相", "像", "项", "象", "响", "乡", "香", "详", "享", "祥", "箱", "襄", "湘", "翔"],
    "kan": ["看", "砍", "堪", "坎", "刊", "瞰", "侃", "勘", "龛", "戡"],
    "lai": ["来", "赖", "莱", "濑", "籁", "涞", "徕", "睐"],
    "ke": ["可", "科", "克", "客", "刻", "课", "颗", "棵", "柯", "磕", "咳", "渴", "坷", "苛"],
    "yi": ["一", "以", "已", "意", "义", "益", "亿", "易", "医", "艺", "仪", "衣", "依", "移"],
    "jing": ["经", "京", "精", "惊", "晶", "睛", "景", "境", "静", "镜", "径", "竞", "净", "敬"],
    "chang": ["常", "长", "场", "厂", "昌", "畅", "尝", "肠", "偿", "倡", "唱", "猖"],

    # 雙字詞
    "nihao": ["你好", "泥蒿", "拟好"],
    "beijing": ["北京", "背景", "背井"],
    "shanghai": ["上海"],
    "zhongguo": ["中国", "中过", "忠国"],
    "pengyou": ["朋友"],
    "laoshi": ["老师", "老是", "老实"],
    "xuesheng": ["学生", "学声"],
    "dianhua": ["电话", "电画"],
    "shouji": ["手机", "收集", "收急"],
    "diannao": ["电脑"],
    "gongzuo": ["工作"],
    "xuexiao": ["学校", "学笑", "学效"],
    "jiating": ["家庭"],
    "shijian": ["时间", "实践"],
    "wenti": ["问题"],
    "xiexie": ["谢谢"],
    "zaijian": ["再见", "在见"],
    "mingbai": ["明白"],
    "zhidao": ["知道", "直到"],
    "xihuan": ["喜欢"],

    # 三字詞
    "xiaopengyou": ["小朋友"],
    "xiaojiejie": ["小姐姐"],
    "daxuesheng": ["大学生"],
    "jisuanji": ["计算机"],

    # 四字詞
    "tianqiyubao": ["天气预报"],
    "shengrikuaile": ["生日快乐"],
    "xinniankuaile": ["新年快乐"],
}

ASSOCIATIONS: Dict[str, List[str]] = {
    "你": ["好", "是", "在", "有", "的", "们"],
    "我": ["是", "的", "们", "要", "在", "有", "想", "爱"],
    "这": ["是", "个", "里", "样", "些", "么"],
    "那": ["是", "个", "里", "样", "些", "么"],
    "什么": ["时候", "地方", "东西", "人"],
}


class CandidateEngine:
    """
    拼音候選詞引擎

    功能:
    - 精確匹配：拼音完全相同的詞，依頻率排序
    - 前綴補充：精確結果不足 5 個時，補上以輸入為前綴的拼音的詞（短拼音優先）
    - 拼音分詞：輸入長度 >= 4 時，嘗試切成「已知拼音 + 剩餘部分」組合候選
    - 最多回傳 20 個候選
    """

    def __init__(self, words: Optional[Mapping[str, Iterable[str]]] = None):
        self._logger = get_logger("candidates")
        self._lock = threading.Lock()
        self._dict: Dict[str, List[CandidateWord]] = {}
        self.load_words(COMMON_WORDS if words is None else words)

    def load_words(self, words: Mapping[str, Iterable[str]]) -> None:
        """依清單順序給定初始頻率 1000 - 10 * index"""
        with self._lock:
            for pinyin, word_list in words.items():
                self._dict[pinyin.lower()] = [
                    CandidateWord(word, 1000 - index * 10)
                    for index, word in enumerate(word_list)
                ]
        self._logger.debug(f"候選詞典載入 {len(self._dict)} 個拼音")

    def add_word(self, pinyin: str, word: str, frequency: int = 0) -> None:
        key = pinyin.lower()
        with self._lock:
            entries = self._dict.setdefault(key, [])
            if any(entry.word == word for entry in entries):
                return
            entries.append(CandidateWord(word, frequency))

    def _sorted_words(self, key: str) -> List[str]:
        entries = self._dict.get(key, [])
        return [entry.word for entry in sorted(entries, key=lambda e: e.frequency, reverse=True)]

    def get_candidates(self, pinyin: str) -> List[str]:
        """
        取得拼音候選詞

        範例:
            >>> engine = CandidateEngine()
            >>> engine.get_candidates("nihao")[0]
            '你好'
        """
        if not pinyin:
            return []

        lower = pinyin.lower()
        candidates = list(self._sorted_words(lower))

        if len(candidates) < PREFIX_FILL_THRESHOLD:
            prefixed = sorted(
                (key for key in self._dict if key.startswith(lower) and key != lower),
                key=len,
            )
            for key in prefixed:
                for word in self._sorted_words(key):
                    if word not in candidates:
                        candidates.append(word)

        if len(lower) >= 4:
            for word in self._segment(lower):
                if word not in candidates:
                    candidates.append(word)

        return candidates[:MAX_CANDIDATES]

    def _segment(self, pinyin: str) -> List[str]:
        """將連續拼音切為「已知拼音 (2-4 字母) + 其餘」並組合前幾名候選"""
        results = []
        for first_len in range(2, min(4, len(pinyin) - 2) + 1):
            first = pinyin[:first_len]
            rest = pinyin[first_len:]
            if first not in self._dict:
                continue
            first_words = self._sorted_words(first)
            rest_words = self.get_candidates(rest)
            for first_word in first_words[:3]:
                for rest_word in rest_words[:3]:
                    results.append(first_word + rest_word)
                    if len(results) >= MAX_SEGMENT_RESULTS:
                        return results
        return results

    def update_frequency(self, pinyin: str, word: str) -> bool:
        """使用者選字後頻率 +1；拼音或詞不存在時不做事並回傳 False"""
        with self._lock:
            for entry in self._dict.get(pinyin.lower(), []):
                if entry.word == word:
                    entry.frequency += 1
                    return True
        return False

    def get_frequency(self, pinyin: str, word: str) -> Optional[int]:
        for entry in self._dict.get(pinyin.lower(), []):
            if entry.word == word:
                return entry.frequency
        return None

    @staticmethod
    def get_associations(previous_word: str) -> List[str]:
        """聯想詞：根據前一個詞給出可能的後續字詞"""
        return list(ASSOCIATIONS.get(previous_word, []))
