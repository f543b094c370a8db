from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Tuple

from hanpw.core.error_dialect import UnknownDictionary

MAX_WORDLIST_FILE_BYTES = 1024 * 1024
MAX_WORD_LENGTH = 64

EN_WORDLIST_FILE = Path(__file__).resolve().parent / "data" / "eff_long.txt"


def dedupe_keep_order(words: List[str]) -> List[str]:
    seen = set()
    out = []
    for w in words:
        n = w.strip()
        if not n or n in seen:
            continue
        seen.add(n)
        out.append(n)
    return out


KO_WORDS = """
가방 가을 가족 강물 거울 거리 겨울 계단 고래 고양이 공원 공책 과일 구름 국수 귤 기차 기린 김치 꽃
나무 나비 낙타 날개 냄비 노래 노을 녹차 눈사람 늑대 다리 달걀 달빛 당근 대나무 도서관 도시 돌고래 동전 두부
들판 딸기 등대 라면 레몬 마당 마을 만두 모래 목걸이 무지개 문어 물결 바나나 바다 바람 바위 반지 발자국 밤하늘
배추 별빛 병원 보름달 복숭아 봄비 부엌 북극곰 분수 비누 비행기 빗물 빵집 사과 사자 사진 산책 새벽 생선 서랍
서울 석류 선물 섬 소나무 소풍 손수건 솜사탕 수박 숲 시계 시장 신발 안경 앵무새 양말 양파 어항 얼음 여름
여우 연필 연못 열쇠 오리 오이 옥수수 우산 우유 운동장 원숭이 은행 의자 이불 인형 자두 자전거 잠자리 장미 장갑
저녁 전화 접시 정원 조개 종이 주전자 지갑 지도 지붕 진주 참외 창문 책상 책장 천둥 청소기 초콜릿 축구 치즈 친구
카메라 커피 코끼리 콩나물 탁자 태양 터널 토끼 토마토 튤립 파도 팽이 편지 포도 풍선 하늘 학교 항구 해바라기 햇살
호랑이 호수 화분 환율 활 흙 가로등 감자 거북이 건물 고구마 곰 공항 구두 그네 까치 나팔 낚시 냉장고
노트 놀이터 다람쥐 단풍 달팽이 도자기 도토리 독수리 두루미 등산 마늘 망원경 모자 무 물감 미역 바구니 박물관 밤 배
버섯 벽돌 별 보리 부채 붓 비둘기 빨래 사슴 산 상자 새 색연필 선풍기 성 세탁기 소금 소리 손 수건
수레 스웨터 시금치 식물 쌀 썰매 아침 악어 앞치마 약국 양 언덕 엽서 염소 옷장 왕관 우체국 운하 유리 음악
의사 이슬 자석 작살 잔디 저울 젓가락 제비 조각 주머니 지구 지팡이 질문 짐 참새 창고 채소 천막 철도 촛불
춤 칠판 칼 코트 콩 큰길 타조 탑 털실 텐트 통 파랑 팔찌 펭귄 평야 포크 폭포 표범 풀 피아노
하마 한강 할머니 해변 향기 허리띠 현관 호박 홍차 화살 휘파람 흰곰 가위 기둥 꿀벌 냇물 눈썹 달력 돛단배 들꽃
""".split()

def normalize_language(language: str) -> str:
    return language.strip().lower().replace("_", "-").split("-", 1)[0]


def get_wordlist(language: str) -> Tuple[str, ...]:
    words = BUILTIN_WORDLISTS.get(normalize_language(language))
    if not words:
        choices = ", ".join(LANGUAGES)
        raise UnknownDictionary(f"no word list for language {language!r}; available: {choices}")
    return words


def _read_wordlist_text(p: Path) -> str:
    try:
        st = p.stat()
    except FileNotFoundError as exc:
        raise UnknownDictionary(f"word list file not found: {p}") from exc
    except OSError as exc:
        raise UnknownDictionary(f"unable to stat word list file '{p}': {exc}") from exc

    if not p.is_file():
        raise UnknownDictionary(f"word list path is not a file: {p}")
    if st.st_size > MAX_WORDLIST_FILE_BYTES:
        raise UnknownDictionary(f"word list file too large: {p} ({st.st_size} bytes)")

    try:
        return p.read_text(encoding="utf-8")
    except (OSError, UnicodeError) as exc:
        raise UnknownDictionary(f"unable to read word list file '{p}': {exc}") from exc


def _parse_wordlist(path: str) -> Tuple[str, ...]:
    text = _read_wordlist_text(Path(path))
    words: List[str] = []
    for raw_line in text.splitlines():
        w = raw_line.strip().lstrip("\ufeff")
        if not w or w.startswith("#"):
            continue
        if any(ch.isspace() for ch in w):
            raise UnknownDictionary(f"invalid word list entry contains whitespace: {w!r}")
        if len(w) > MAX_WORD_LENGTH:
            raise UnknownDictionary(f"invalid word list entry too long: {w!r}")
        words.append(w)

    # Each distinct word keeps an equal chance of being drawn.
    unique = dedupe_keep_order(words)
    if not unique:
        raise UnknownDictionary(f"word list file is empty: {path}")
    return tuple(unique)


def load_wordlist(path: str) -> Tuple[str, ...]:
    """Load a newline-separated word list; blank lines and '#' comments are skipped."""
    p = Path(path).expanduser()
    return _parse_wordlist(str(p))


BUILTIN_WORDLISTS: Dict[str, Tuple[str, ...]] = {
    "en": _parse_wordlist(str(EN_WORDLIST_FILE)),
    "ko": tuple(dedupe_keep_order(KO_WORDS)),
}

LANGUAGES: Tuple[str, ...] = tuple(sorted(BUILTIN_WORDLISTS))
