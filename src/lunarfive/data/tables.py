"""
lunarfive.data.tables
---------------------
Static domain tables. Pure data, built once at import and never mutated.

KUA_MAP_BY_GENDER is indexed by (ROC year mod 9). Both rows agree with the
usual Gregorian-year rule (male: 11 - y mod 9, female: y mod 9 + 4, reduced
to 1..9) shifted by ROC_OFFSET = 1911 ≡ 3 (mod 9).
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Tuple

from ..core.types import ElementInsight, KuaProfile

KUA_MAP_BY_GENDER: Mapping[str, Tuple[int, ...]] = MappingProxyType({
    "male":   (8, 7, 6, 5, 4, 3, 2, 1, 9),
    "female": (7, 8, 9, 1, 2, 3, 4, 5, 6),
})

# Kua 5 has no trigram of its own; it is read as an Earth trigram by gender.
KUA_FIVE_SUBSTITUTE: Mapping[str, Tuple[int, str]] = MappingProxyType({
    "male":   (2, "命卦 5（男）依傳統用坤二土判讀。"),
    "female": (8, "命卦 5（女）依傳統用艮八土判讀。"),
})

ELEMENT_ORDER: Tuple[str, ...] = ("木", "火", "土", "金", "水")

TRANSCRIPT_ORDER: Tuple[int, ...] = (1, 2, 3, 4, 6, 7, 8, 9)

HOUTIAN_PROFILES: Mapping[int, KuaProfile] = MappingProxyType({
    1: KuaProfile(
        element="水", gua="坎", symbol="☵", type="東四命・智慧型",
        personality="思路靈活、善於觀察與應變，重感情但不輕易表露，遇事能沉著思考。",
        health="留意腎臟、泌尿與生殖系統，避免熬夜與過度勞累，注意腰部保暖。",
        transcript="一坎水，屬東四命。水主智，個性柔中帶剛、適應力強；健康上宜顧腎、膀胱與腰背。",
    ),
    2: KuaProfile(
        element="土", gua="坤", symbol="☷", type="西四命・包容型",
        personality="穩重踏實、包容心強，做事按部就班，重視家庭與團隊和諧。",
        health="留意脾胃與消化系統，飲食宜定時定量，少食生冷甜膩。",
        transcript="二坤土，屬西四命。土主信，個性厚道、可靠耐勞；健康上宜顧脾胃與腹部。",
    ),
    3: KuaProfile(
        element="木", gua="震", symbol="☳", type="東四命・行動型",
        personality="積極果斷、行動力強，富開創精神，說話直接，有時略顯急躁。",
        health="留意肝膽與筋骨，注意情緒調節，避免動怒與過量飲酒。",
        transcript="三震木，屬東四命。木主仁，個性熱心、勇於嘗試；健康上宜顧肝膽、足部與筋絡。",
    ),
    4: KuaProfile(
        element="木", gua="巽", symbol="☴", type="東四命・協調型",
        personality="溫和細膩、善於溝通協調，處事圓融，重視人際關係。",
        health="留意肝膽、呼吸道與神經系統，作息宜規律，避免長期緊繃。",
        transcript="四巽木，屬東四命。風木主入，個性柔順、擅長斡旋；健康上宜顧肝膽、股部與氣管。",
    ),
    6: KuaProfile(
        element="金", gua="乾", symbol="☰", type="西四命・領導型",
        personality="有原則、有魄力，責任感重，善於規劃與統籌，自我要求高。",
        health="留意肺部、呼吸道與頭部，注意骨骼保養，避免過度操勞。",
        transcript="六乾金，屬西四命。金主義，個性剛健、具領導力；健康上宜顧肺、頭部與骨骼。",
    ),
    7: KuaProfile(
        element="金", gua="兌", symbol="☱", type="西四命・表達型",
        personality="開朗健談、人緣佳，反應快、善於表達，喜歡輕鬆愉快的氛圍。",
        health="留意口腔、咽喉與肺部，少食辛辣，注意呼吸道保養。",
        transcript="七兌金，屬西四命。澤金主悅，個性活潑、口才好；健康上宜顧口舌、咽喉與肺。",
    ),
    8: KuaProfile(
        element="土", gua="艮", symbol="☶", type="西四命・穩健型",
        personality="沉穩內斂、意志堅定，做事謹慎有耐性，守信重諾。",
        health="留意脾胃、關節與背部，避免久坐，宜適度活動筋骨。",
        transcript="八艮土，屬西四命。山土主止，個性穩定、能堅持；健康上宜顧脾胃、手指與關節。",
    ),
    9: KuaProfile(
        element="火", gua="離", symbol="☲", type="東四命・熱情型",
        personality="熱情外向、富創意與表現欲，觀察敏銳，重視外在形象。",
        health="留意心臟、血液循環與眼睛，避免情緒大起大落，注意睡眠品質。",
        transcript="九離火，屬東四命。火主禮，個性明朗、具感染力；健康上宜顧心血管與眼睛。",
    ),
})

ELEMENT_INSIGHTS: Mapping[str, ElementInsight] = MappingProxyType({
    "木": ElementInsight(
        title="木：生發與成長",
        summary="木主生發，代表伸展、仁愛與向上的力量。",
        system="對應臟腑：肝、膽\n對應方位：東",
        suitable_colors="綠、青、黑、藍",
        unsuitable_colors="白、金、銀",
    ),
    "火": ElementInsight(
        title="火：熱情與光明",
        summary="火主炎上，代表熱情、禮節與表現力。",
        system="對應臟腑：心、小腸\n對應方位：南",
        suitable_colors="紅、紫、綠、青",
        unsuitable_colors="黑、藍",
    ),
    "土": ElementInsight(
        title="土：承載與包容",
        summary="土主承載，代表穩定、誠信與包容。",
        system="對應臟腑：脾、胃\n對應方位：中",
        suitable_colors="黃、咖啡、紅、紫",
        unsuitable_colors="綠、青",
    ),
    "金": ElementInsight(
        title="金：收斂與決斷",
        summary="金主肅殺，代表果斷、義氣與規範。",
        system="對應臟腑：肺、大腸\n對應方位：西",
        suitable_colors="白、金、銀、黃、咖啡",
        unsuitable_colors="紅、紫",
    ),
    "水": ElementInsight(
        title="水：流動與智慧",
        summary="水主潤下，代表智慧、靈活與變通。",
        system="對應臟腑：腎、膀胱\n對應方位：北",
        suitable_colors="黑、藍、白、金、銀",
        unsuitable_colors="黃、咖啡",
    ),
})

# Relation of `other` to `me`, named by the six-relations convention.
RELATION_LABELS: Mapping[str, str] = MappingProxyType({
    "same": "兄弟",
    "generates_me": "父母",
    "i_generate": "子孫",
    "controls_me": "官鬼",
    "i_control": "錢財",
})
