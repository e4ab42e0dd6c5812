"""Word lookup with translations via Datamuse and Google Translate."""

import logging

import requests

from flashcard_app.config import FlashcardConfig
from flashcard_app.exceptions import LookupServiceError
from flashcard_app.models import WordDefinition, WordLookupResult
from flashcard_app.services.rate_limiter import RateLimiter
from flashcard_app.services.word_cache_service import WordCacheService

logger = logging.getLogger(__name__)

# Datamuse part-of-speech tags (from md=p)
_DATAMUSE_POS_TAGS = {
    "n": "noun",
    "v": "verb",
    "adj": "adjective",
    "adv": "adverb",
    "prep": "preposition",
    "conj": "conjunction",
    "pron": "pronoun",
    "interj": "interjection",
}

# Context phrases that steer machine translation towards one part of speech
_TRANSLATION_CONTEXT = {
    "noun": "the {word}",
    "verb": "to {word}",
    "adjective": "a {word} day",
    "adverb": "doing {word}",
}

# Fragments the context phrases leave in translations
_CONTEXT_FRAGMENTS = ("該", "的東西", "東西", "做得", "做它", "一個", "一天", "天", "做")

# Common polysemous words answered without any network access
OFFLINE_TRANSLATIONS: dict[str, dict[str, str]] = {
    "fine": {
        "adjective": "好的、優良的",
        "noun": "罰款",
        "verb": "處以罰款",
        "adverb": "很好地",
    },
    "run": {"verb": "跑、運行", "noun": "跑步、運行"},
    "light": {"noun": "光、燈", "adjective": "輕的、明亮的", "verb": "點燃"},
    "book": {"noun": "書、書籍", "verb": "預訂"},
    "play": {"verb": "玩、播放", "noun": "戲劇、遊戲"},
    "watch": {"verb": "觀看、注視", "noun": "手錶"},
    "change": {"verb": "改變", "noun": "變化、零錢"},
    "present": {
        "noun": "禮物、現在",
        "adjective": "出席的、現在的",
        "verb": "呈現、贈送",
    },
    "right": {
        "adjective": "正確的、右邊的",
        "noun": "權利、右邊",
        "adverb": "正確地",
    },
    "left": {"adjective": "左邊的", "noun": "左邊", "verb": "離開（過去式）"},
    "bank": {"noun": "銀行、河岸", "verb": "存款"},
    "spring": {"noun": "春天、彈簧、泉水", "verb": "彈跳、湧出"},
    "match": {"noun": "比賽、火柴、匹配", "verb": "匹配、相符"},
    "bow": {"noun": "弓、鞠躬", "verb": "鞠躬、彎曲"},
    "lead": {"verb": "帶領", "noun": "鉛、領先"},
    "close": {"verb": "關閉", "adjective": "近的、親密的"},
    "order": {"noun": "順序、訂單、命令", "verb": "訂購、命令"},
    "park": {"noun": "公園", "verb": "停車"},
    "coach": {"noun": "教練", "verb": "訓練、指導"},
    "train": {"noun": "火車", "verb": "訓練"},
    "bear": {"noun": "熊", "verb": "忍受、攜帶"},
    "firm": {"noun": "公司", "adjective": "堅固的"},
    "kind": {"noun": "種類", "adjective": "仁慈的"},
    "mean": {"verb": "意味著", "adjective": "刻薄的、平均的"},
    "fair": {"adjective": "公平的、晴朗的", "noun": "展覽、博覽會"},
    "letter": {"noun": "信件、字母"},
    "date": {"noun": "日期、約會、棗子", "verb": "約會、註明日期"},
    "file": {"noun": "檔案、文件", "verb": "歸檔、提出(申請)"},
    "apple": {"noun": "蘋果"},
    "orange": {"noun": "橘子、橙色"},
}


class DictionaryService:
    """Look up English words and translate each part of speech.

    Lookup order: local cache, offline table, then the web APIs. Every
    outgoing request goes through the shared rate limiter.

    Implements DictionaryProvider protocol.
    """

    def __init__(
        self,
        config: FlashcardConfig,
        cache: WordCacheService | None = None,
        rate_limiter: RateLimiter | None = None,
        session: requests.Session | None = None,
    ):
        """Initialize the dictionary service.

        Args:
            config: Configuration with API endpoints and limits
            cache: Lookup cache (defaults to the configured cache file)
            rate_limiter: Limiter shared by all requests
            session: HTTP session (one is created if omitted)
        """
        self.config = config
        self._cache = cache or WordCacheService(
            config.cache_path,
            ttl_days=config.cache_ttl_days,
            max_entries=config.cache_max_entries,
        )
        self._rate_limiter = rate_limiter or RateLimiter(
            max_requests=config.max_requests_per_minute, window=60.0
        )
        if session is None:
            session = requests.Session()
            session.headers["User-Agent"] = config.user_agent
        self._session = session

    @property
    def name(self) -> str:
        return "Datamuse + Google Translate"

    def lookup(self, word: str) -> WordLookupResult:
        """Look up a word and translate every part of speech found.

        Args:
            word: Word to look up

        Returns:
            Lookup result; failures carry a user-facing error message
        """
        if not word or not word.strip():
            return WordLookupResult(word=word or "", error_message="Please enter a word")

        clean_word = word.strip().lower()

        cached = self._cache.get(clean_word)
        if cached is not None:
            logger.debug(f"Cache hit: {clean_word}")
            return cached

        offline = self.offline_result(clean_word)
        if offline is not None:
            self._cache.set(clean_word, offline)
            return offline

        result = WordLookupResult(word=clean_word)
        try:
            if not self._word_exists(clean_word):
                suggestions = self._spelling_suggestions(clean_word)
                if suggestions:
                    result.error_message = (
                        f'"{clean_word}" not found. Did you mean: {", ".join(suggestions[:3])}?'
                    )
                else:
                    result.error_message = "Word not found"
                return result

            parts_of_speech = self._parts_of_speech(clean_word) or ["noun"]
            for pos in parts_of_speech:
                query = _TRANSLATION_CONTEXT.get(pos, "{word}").format(word=clean_word)
                translation = clean_translation(self._translate(query))
                result.definitions.append(
                    WordDefinition(word=clean_word, part_of_speech=pos, translation=translation)
                )
        except requests.exceptions.Timeout:
            result.error_message = "Lookup timed out, check your network connection"
            return result

        result.success = bool(result.definitions)
        if result.success:
            self._cache.set(clean_word, result)
        return result

    @staticmethod
    def offline_result(word: str) -> WordLookupResult | None:
        """Build a result from the offline table, or None if the word is not in it."""
        translations = OFFLINE_TRANSLATIONS.get(word)
        if translations is None:
            return None
        return WordLookupResult(
            word=word,
            definitions=[
                WordDefinition(word=word, part_of_speech=pos, translation=text)
                for pos, text in translations.items()
            ],
            success=True,
        )

    def _get_json(self, url: str, params: dict):
        """Rate-limited GET returning decoded JSON.

        Raises:
            requests.exceptions.Timeout: If the request times out
            LookupServiceError: On any other request or decoding failure
        """
        self._rate_limiter.acquire()
        try:
            response = self._session.get(url, params=params, timeout=self.config.request_timeout)
            response.raise_for_status()
            return response.json()
        except requests.exceptions.Timeout:
            raise
        except (requests.RequestException, ValueError) as e:
            raise LookupServiceError(str(e)) from e

    def _word_exists(self, word: str) -> bool:
        try:
            data = self._get_json(self.config.datamuse_api_url, {"sp": word, "max": 1})
        except LookupServiceError as e:
            # Let translation proceed when the check itself is unavailable
            logger.warning(f"Spell check failed for '{word}': {e}")
            return True

        if isinstance(data, list) and data and isinstance(data[0], dict):
            return str(data[0].get("word", "")).lower() == word
        return False

    def _spelling_suggestions(self, word: str) -> list[str]:
        try:
            data = self._get_json(self.config.datamuse_api_url, {"sp": f"{word}*", "max": 5})
        except LookupServiceError:
            return []
        if not isinstance(data, list):
            return []
        return [item["word"] for item in data if isinstance(item, dict) and item.get("word")]

    def _parts_of_speech(self, word: str) -> list[str]:
        try:
            data = self._get_json(
                self.config.datamuse_api_url, {"sp": word, "md": "p", "max": 1}
            )
        except LookupServiceError:
            return []

        parts: list[str] = []
        if isinstance(data, list) and data and isinstance(data[0], dict):
            for tag in data[0].get("tags", []):
                pos = _DATAMUSE_POS_TAGS.get(tag)
                if pos and pos not in parts:
                    parts.append(pos)
        return parts

    def _translate(self, text: str) -> str:
        """Translate text, returning the input unchanged on failure."""
        params = {
            "client": "gtx",
            "sl": self.config.source_language,
            "tl": self.config.target_language,
            "dt": "t",
            "q": text,
        }
        try:
            data = self._get_json(self.config.translate_api_url, params)
        except LookupServiceError as e:
            logger.warning(f"Translation failed for '{text}': {e}")
            return text

        # Response shape: [[["translated", "original", ...], ...], ...]
        try:
            translated = data[0][0][0]
        except (IndexError, KeyError, TypeError):
            return text
        return translated if isinstance(translated, str) and translated else text


def clean_translation(translation: str) -> str:
    """Strip fragments introduced by the translation context phrases.

    Returns the original text if cleaning would leave nothing.
    """
    if not translation:
        return translation
    cleaned = translation
    for fragment in _CONTEXT_FRAGMENTS:
        cleaned = cleaned.replace(fragment, "")
    cleaned = cleaned.strip()
    return cleaned or translation
