"""
Built-in international relations dictionary.

Fixed at deploy time. Server-managed custom terms are appended to this list
when a dictionary snapshot is built (see DictionaryService).
"""
from typing import Tuple

from agent.term_detection.models import Term

_RAW_TERMS = [
    # 国際関係理論
    {"en": "realism", "ja": "リアリズム（現実主義）", "category": "theory",
     "note": "国家の権力と利益を中心に国際政治を説明する理論", "reference": "Morgenthau, Politics Among Nations (1948)"},
    {"en": "neorealism", "ja": "ネオリアリズム（構造的現実主義）", "category": "theory",
     "note": "国際システムの無政府的構造が国家行動を規定するとする理論", "reference": "Waltz, Theory of International Politics (1979)"},
    {"en": "offensive realism", "ja": "攻撃的現実主義", "category": "theory",
     "note": "大国は覇権を目指して権力を最大化するとする立場", "reference": "Mearsheimer, The Tragedy of Great Power Politics (2001)"},
    {"en": "defensive realism", "ja": "防御的現実主義", "category": "theory",
     "note": "国家は安全の確保を優先し、過度な拡張を避けるとする立場", "reference": ""},
    {"en": "liberalism", "ja": "リベラリズム（自由主義）", "category": "theory",
     "note": "相互依存・制度・民主主義による協調の可能性を重視する理論", "reference": ""},
    {"en": "neoliberal institutionalism", "ja": "ネオリベラル制度論", "category": "theory",
     "note": "国際制度が取引費用を下げ協力を促進するとする理論", "reference": "Keohane, After Hegemony (1984)"},
    {"en": "constructivism", "ja": "コンストラクティヴィズム（構成主義）", "category": "theory",
     "note": "規範・アイデンティティ・間主観的理解が国際政治を構成するとする理論", "reference": "Wendt, Social Theory of International Politics (1999)"},
    {"en": "anarchy", "ja": "アナーキー（無政府状態）", "category": "theory",
     "note": "国家の上位に中央政府が存在しない国際システムの状態", "reference": ""},
    {"en": "balance of power", "ja": "勢力均衡", "category": "theory",
     "note": "特定の国家が支配的にならないよう力が均衡する状態", "reference": ""},
    {"en": "balance of threat", "ja": "脅威均衡", "category": "theory",
     "note": "国家は力ではなく脅威に対して均衡をとるとする理論", "reference": "Walt, The Origins of Alliances (1987)"},
    {"en": "hegemonic stability theory", "ja": "覇権安定論", "category": "theory",
     "note": "覇権国の存在が国際経済秩序の安定をもたらすとする理論", "reference": "Kindleberger, The World in Depression (1973)"},
    {"en": "hegemony", "ja": "覇権", "category": "theory",
     "note": "単一国家による圧倒的な支配的地位", "reference": ""},
    {"en": "polarity", "ja": "極性", "category": "theory",
     "note": "国際システムにおける大国の数による構造の分類", "reference": ""},
    {"en": "unipolarity", "ja": "単極構造", "category": "theory", "note": "", "reference": ""},
    {"en": "bipolarity", "ja": "二極構造", "category": "theory", "note": "", "reference": ""},
    {"en": "multipolarity", "ja": "多極構造", "category": "theory", "note": "", "reference": ""},
    {"en": "national interest", "ja": "国益", "category": "theory", "note": "", "reference": ""},
    {"en": "state", "ja": "国家", "category": "theory", "note": "", "reference": ""},
    {"en": "nation state", "ja": "国民国家", "category": "theory",
     "note": "国民と領域的主権が一致するとされる近代国家の形態", "reference": ""},
    {"en": "non-state actor", "ja": "非国家主体", "category": "theory", "note": "", "reference": ""},
    {"en": "power", "ja": "権力・パワー", "category": "theory", "note": "", "reference": ""},
    {"en": "great power", "ja": "大国", "category": "theory", "note": "", "reference": ""},
    {"en": "soft power", "ja": "ソフト・パワー", "category": "theory",
     "note": "文化・価値観・政策の魅力によって他国を引きつける力", "reference": "Nye, Soft Power (2004)"},
    {"en": "status quo", "ja": "現状維持", "category": "theory", "note": "", "reference": ""},
    {"en": "norm", "ja": "規範", "category": "theory", "note": "", "reference": ""},
    {"en": "identity", "ja": "アイデンティティ", "category": "theory", "note": "", "reference": ""},
    {"en": "discourse", "ja": "言説", "category": "theory", "note": "", "reference": ""},
    {"en": "democratic peace", "ja": "民主的平和論", "category": "theory",
     "note": "民主主義国家同士は戦争をしないとする命題", "reference": "Russett, Grasping the Democratic Peace (1993)"},

    # 安全保障
    {"en": "security dilemma", "ja": "安全保障のジレンマ", "category": "security",
     "note": "自国の安全強化が他国の不安を招き、結果的に全体の安全が低下する状況", "reference": "Jervis, \"Cooperation under the Security Dilemma\" (1978)"},
    {"en": "deterrence", "ja": "抑止", "category": "security",
     "note": "報復の威嚇によって相手の行動を思いとどまらせること", "reference": "Schelling, Arms and Influence (1966)"},
    {"en": "extended deterrence", "ja": "拡大抑止", "category": "security",
     "note": "同盟国に対する攻撃も抑止の対象とすること（核の傘）", "reference": ""},
    {"en": "nuclear deterrence", "ja": "核抑止", "category": "security", "note": "", "reference": ""},
    {"en": "compellence", "ja": "強要", "category": "security",
     "note": "威嚇によって相手に行動を起こさせる、または変更させること", "reference": "Schelling, Arms and Influence (1966)"},
    {"en": "balancing", "ja": "バランシング（均衡化）", "category": "security", "note": "", "reference": ""},
    {"en": "bandwagoning", "ja": "バンドワゴニング", "category": "security",
     "note": "強い側・脅威となる側に同調すること", "reference": ""},
    {"en": "buck-passing", "ja": "責任転嫁", "category": "security",
     "note": "脅威への対処を他国に委ねること", "reference": ""},
    {"en": "alliance", "ja": "同盟", "category": "security", "note": "", "reference": ""},
    {"en": "entrapment", "ja": "巻き込まれ", "category": "security",
     "note": "同盟国の紛争に望まず巻き込まれる懸念", "reference": "Snyder, \"The Security Dilemma in Alliance Politics\" (1984)"},
    {"en": "abandonment", "ja": "見捨てられ", "category": "security",
     "note": "同盟国に見捨てられる懸念", "reference": "Snyder, \"The Security Dilemma in Alliance Politics\" (1984)"},
    {"en": "arms race", "ja": "軍拡競争", "category": "security", "note": "", "reference": ""},
    {"en": "arms control", "ja": "軍備管理", "category": "security", "note": "", "reference": ""},
    {"en": "proliferation", "ja": "拡散", "category": "security", "note": "", "reference": ""},
    {"en": "nuclear proliferation", "ja": "核拡散", "category": "security", "note": "", "reference": ""},
    {"en": "escalation", "ja": "エスカレーション", "category": "security", "note": "", "reference": ""},
    {"en": "collective security", "ja": "集団安全保障", "category": "security", "note": "", "reference": ""},
    {"en": "collective self-defense", "ja": "集団的自衛権", "category": "security", "note": "", "reference": ""},
    {"en": "preventive war", "ja": "予防戦争", "category": "security", "note": "", "reference": ""},
    {"en": "preemptive strike", "ja": "先制攻撃", "category": "security", "note": "", "reference": ""},
    {"en": "credibility", "ja": "信頼性", "category": "security", "note": "", "reference": ""},
    {"en": "signaling", "ja": "シグナリング", "category": "security", "note": "", "reference": ""},
    {"en": "costly signal", "ja": "コストのかかるシグナル", "category": "security", "note": "", "reference": "Fearon, \"Signaling Foreign Policy Interests\" (1997)"},
    {"en": "audience costs", "ja": "観衆費用", "category": "security",
     "note": "公約を撤回した指導者が国内で負う政治的コスト", "reference": "Fearon, \"Domestic Political Audiences\" (1994)"},
    {"en": "commitment problem", "ja": "コミットメント問題", "category": "security", "note": "", "reference": "Fearon, \"Rationalist Explanations for War\" (1995)"},
    {"en": "power transition", "ja": "パワー・トランジション", "category": "security",
     "note": "覇権国と挑戦国の力の逆転が戦争の危険を高めるとする理論", "reference": "Organski, World Politics (1958)"},
    {"en": "thucydides trap", "ja": "トゥキディデスの罠", "category": "security", "note": "", "reference": "Allison, Destined for War (2017)"},
    {"en": "gray zone", "ja": "グレーゾーン", "category": "security", "note": "", "reference": ""},
    {"en": "hybrid warfare", "ja": "ハイブリッド戦争", "category": "security", "note": "", "reference": ""},

    # 外交
    {"en": "diplomacy", "ja": "外交", "category": "diplomacy", "note": "", "reference": ""},
    {"en": "coercive diplomacy", "ja": "強制外交", "category": "diplomacy", "note": "", "reference": "George, Forceful Persuasion (1991)"},
    {"en": "engagement", "ja": "関与", "category": "diplomacy", "note": "", "reference": ""},
    {"en": "containment", "ja": "封じ込め", "category": "diplomacy",
     "note": "冷戦期の米国によるソ連膨張阻止政策", "reference": "Kennan, \"The Sources of Soviet Conduct\" (1947)"},
    {"en": "appeasement", "ja": "宥和政策", "category": "diplomacy", "note": "", "reference": ""},
    {"en": "détente", "ja": "デタント（緊張緩和）", "category": "diplomacy", "note": "", "reference": ""},
    {"en": "two-level game", "ja": "2レベル・ゲーム", "category": "diplomacy",
     "note": "国際交渉と国内批准の二つのレベルを同時に扱う交渉モデル", "reference": "Putnam, \"Diplomacy and Domestic Politics\" (1988)"},
    {"en": "sphere of influence", "ja": "勢力圏", "category": "diplomacy", "note": "", "reference": ""},
    {"en": "public diplomacy", "ja": "広報外交", "category": "diplomacy", "note": "", "reference": ""},
    {"en": "sanctions", "ja": "制裁", "category": "diplomacy", "note": "", "reference": ""},
    {"en": "economic sanctions", "ja": "経済制裁", "category": "diplomacy", "note": "", "reference": ""},

    # 国際機構
    {"en": "international organization", "ja": "国際機構", "category": "organization", "note": "", "reference": ""},
    {"en": "united nations", "ja": "国際連合", "category": "organization", "note": "", "reference": ""},
    {"en": "security council", "ja": "安全保障理事会", "category": "organization", "note": "", "reference": ""},
    {"en": "general assembly", "ja": "総会", "category": "organization", "note": "", "reference": ""},
    {"en": "international regime", "ja": "国際レジーム", "category": "organization",
     "note": "特定の問題領域で行為主体の期待が収斂する原則・規範・ルール・手続き", "reference": "Krasner, International Regimes (1983)"},
    {"en": "multilateralism", "ja": "多国間主義", "category": "organization", "note": "", "reference": "Ruggie, Multilateralism Matters (1993)"},
    {"en": "global governance", "ja": "グローバル・ガバナンス", "category": "organization", "note": "", "reference": ""},

    # 国際政治経済
    {"en": "interdependence", "ja": "相互依存", "category": "economy", "note": "", "reference": "Keohane & Nye, Power and Interdependence (1977)"},
    {"en": "complex interdependence", "ja": "複合的相互依存", "category": "economy", "note": "", "reference": "Keohane & Nye, Power and Interdependence (1977)"},
    {"en": "weaponized interdependence", "ja": "武器化された相互依存", "category": "economy", "note": "", "reference": "Farrell & Newman (2019)"},
    {"en": "economic statecraft", "ja": "経済的国家運営術", "category": "economy", "note": "", "reference": "Baldwin, Economic Statecraft (1985)"},
    {"en": "free trade", "ja": "自由貿易", "category": "economy", "note": "", "reference": ""},
    {"en": "protectionism", "ja": "保護主義", "category": "economy", "note": "", "reference": ""},
    {"en": "globalization", "ja": "グローバル化", "category": "economy", "note": "", "reference": ""},

    # 国際法
    {"en": "sovereignty", "ja": "主権", "category": "law", "note": "", "reference": ""},
    {"en": "westphalian sovereignty", "ja": "ウェストファリア的主権", "category": "law", "note": "", "reference": "Krasner, Sovereignty: Organized Hypocrisy (1999)"},
    {"en": "non-intervention", "ja": "内政不干渉", "category": "law", "note": "", "reference": ""},
    {"en": "humanitarian intervention", "ja": "人道的介入", "category": "law", "note": "", "reference": ""},
    {"en": "responsibility to protect", "ja": "保護する責任（R2P）", "category": "law", "note": "", "reference": "ICISS Report (2001)"},
    {"en": "self-determination", "ja": "民族自決", "category": "law", "note": "", "reference": ""},
    {"en": "treaty", "ja": "条約", "category": "law", "note": "", "reference": ""},
    {"en": "customary international law", "ja": "慣習国際法", "category": "law", "note": "", "reference": ""},

    # 地域研究
    {"en": "indo-pacific", "ja": "インド太平洋", "category": "region", "note": "", "reference": ""},
    {"en": "cold war", "ja": "冷戦", "category": "region", "note": "", "reference": ""},
    {"en": "post-cold war", "ja": "ポスト冷戦", "category": "region", "note": "", "reference": ""},
    {"en": "rules-based international order", "ja": "ルールに基づく国際秩序", "category": "region", "note": "", "reference": ""},
    {"en": "liberal international order", "ja": "リベラル国際秩序", "category": "region", "note": "", "reference": "Ikenberry, Liberal Leviathan (2011)"},
]

BUILTIN_TERMS: Tuple[Term, ...] = tuple(Term.from_dict(raw) for raw in _RAW_TERMS)
