"""
題庫拼音搜尋範例

展示三種匹配嚴格度、相關度排序與文字模糊相似度。
"""

from pinyinmatch import (
    EngineConfig,
    InMemoryStore,
    SearchEngine,
    StrictnessLevel,
    is_similar,
)

QUESTIONS = [
    {
        "type": "SINGLE_CHOICE",
        "text": "马克思主义理论区别于其他理论的根本特征是",
        "options": ["A. 实践性", "B. 阶级性", "C. 科学性", "D. 革命性"],
        "correct": ["A"],
    },
    {
        "type": "TRUE_FALSE",
        "text": "实践是检验真理的唯一标准",
        "options": [],
        "correct": ["T"],
    },
    {
        "type": "MULTIPLE_CHOICE",
        "text": "中国特色社会主义理论体系包括",
        "options": ["A. 邓小平理论", "B. 三个代表重要思想", "C. 科学发展观", "D. 毛泽东思想"],
        "correct": ["A", "B", "C"],
    },
]


def demo_levels():
    print("=" * 60)
    print("範例 1: 三種匹配嚴格度")
    print("=" * 60)

    timing_data = []
    engine = SearchEngine(
        InMemoryStore(),
        config=EngineConfig(on_timing=lambda op, elapsed: timing_data.append((op, elapsed))),
    )
    index = engine.create_index(QUESTIONS)

    for level, query in [
        (StrictnessLevel.LOW, "masi"),
        (StrictnessLevel.MEDIUM, "zhuyi"),
        (StrictnessLevel.HIGH, "shijian"),
    ]:
        engine.set_level(level)
        print(f"\n[{level.name}] {engine.level_config.description()}")
        for question in index.search(query):
            print(f"  {query!r} -> {question.text}  答案: {question.answer_description}")

    print("\n計時:")
    for operation, elapsed in timing_data:
        print(f"  {operation}: {elapsed * 1000:.1f}ms")
    print()


def demo_similarity():
    print("=" * 60)
    print("範例 2: 文字模糊相似度")
    print("=" * 60)

    corpus = "马克思主义理论，区别于其他理论的根本特征。"
    for query in ["根本特征", "马克恩", "毛泽东思想"]:
        print(f"  is_similar({query!r}) = {is_similar(query, corpus)}")
    print()


if __name__ == "__main__":
    demo_levels()
    demo_similarity()
