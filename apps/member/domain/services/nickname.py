"""Random Nickname Generator.

형용사 + 명사 + "#" + 두 자리 숫자 형식의 닉네임을 만듭니다.
예: 귀여운고양이#07

조합 공간은 40 x 40 x 100 = 160,000 입니다.
"""

from __future__ import annotations

import random
import re

ADJECTIVES: tuple[str, ...] = (
    "멍청한", "빠른", "귀여운", "화난", "배고픈", "행복한", "똑똑한", "졸린", "심술궂은", "시끄러운",
    "고요한", "차가운", "뜨거운", "용감한", "겁쟁이", "수줍은", "대담한", "게으른", "성실한", "조용한",
    "활발한", "이상한", "웃긴", "짜증난", "애매한", "창의적인", "독특한", "신나는", "엉뚱한", "수상한",
    "무서운", "어리석은", "슬픈", "고마운", "느린", "적극적인", "부끄러운", "당당한", "예민한", "단순한",
)  # fmt: skip

NOUNS: tuple[str, ...] = (
    "고양이", "강아지", "토끼", "사자", "호랑이", "펭귄", "코끼리", "여우", "늑대", "곰",
    "너구리", "다람쥐", "치타", "하이에나", "고릴라", "캥거루", "햄스터", "카멜레온", "악어", "두더지",
    "수달", "부엉이", "참새", "독수리", "오리", "거북이", "물개", "돌고래", "고래", "불가사리",
    "미어캣", "해파리", "코알라", "낙타", "아기돼지", "강치", "이구아나", "오징어", "문어", "갈매기",
)  # fmt: skip

NICKNAME_PATTERN = re.compile(
    rf"^({'|'.join(ADJECTIVES)})({'|'.join(NOUNS)})#\d{{2}}$"
)

_random = random.SystemRandom()


def generate_random_nickname(rng: random.Random | None = None) -> str:
    """랜덤 닉네임 1개 생성 (중복 검사 없음).

    Args:
        rng: 난수 생성기 (테스트에서 시드 고정용)
    """
    rng = rng or _random
    adjective = rng.choice(ADJECTIVES)
    noun = rng.choice(NOUNS)
    number = rng.randrange(100)
    return f"{adjective}{noun}#{number:02d}"
