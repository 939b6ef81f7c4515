import logging
import threading

from fastapi import FastAPI, Query
from pydantic import BaseModel, Field

from speller.common.config import Settings
from speller.spellcheck.engine import WORD_RE, SpellCorrectorEngine, spellcorrector_engine
from speller.spellcheck.loader import load_models
from speller.spellcheck.policy import ModelSet

logger = logging.getLogger(__name__)

app = FastAPI(title="Spelling API")


class SpellcheckResponse(BaseModel):
    suggestion: str | None


class CorrectRequest(BaseModel):
    words: list[str] = Field(..., max_length=1000)


class CorrectResponse(BaseModel):
    corrected: list[str]


class WordResponse(BaseModel):
    word: str
    known: bool


class SpellcheckService:
    def __init__(
        self,
        *,
        settings: Settings | None = None,
        model_set: ModelSet | None = None,
        engine: SpellCorrectorEngine | None = None,
    ) -> None:
        self.settings = settings or Settings()
        self.engine = engine or spellcorrector_engine
        self._model_set = model_set
        self._lock = threading.Lock()

    @property
    def model_set(self) -> ModelSet:
        if self._model_set is None:
            with self._lock:
                if self._model_set is None:
                    logger.info("loading spelling models on first use")
                    self._model_set = load_models(self.settings)
        return self._model_set

    def suggest(self, q: str) -> SpellcheckResponse:
        models = self.model_set
        corrected: dict[str, str] = {}
        for word in self.engine.iter_words(q):
            if word in corrected:
                continue
            result = models.correct_word(word)
            if result.changed:
                corrected[word] = result.corrected

        if not corrected:
            return SpellcheckResponse(suggestion=None)

        def _replace(match) -> str:
            token = match.group(0)
            replacement = corrected.get(token.lower())
            if not replacement:
                return token
            return self.engine.apply_case(token, replacement)

        suggestion = WORD_RE.sub(_replace, q)
        if suggestion == q:
            return SpellcheckResponse(suggestion=None)

        return SpellcheckResponse(suggestion=suggestion)

    def correct(self, words: list[str]) -> CorrectResponse:
        normalized = [self.engine.normalize_word(word) for word in words]
        return CorrectResponse(corrected=self.model_set.correct(normalized))

    def lookup(self, word: str) -> WordResponse:
        normalized = self.engine.normalize_word(word)
        return WordResponse(word=normalized, known=self.model_set.has_word(normalized))


spellcheck_service = SpellcheckService()


@app.get("/spellcheck", response_model=SpellcheckResponse)
def spellcheck(
    q: str = Query(..., min_length=1),
) -> SpellcheckResponse:
    return spellcheck_service.suggest(q)


@app.post("/correct", response_model=CorrectResponse)
def correct(request: CorrectRequest) -> CorrectResponse:
    return spellcheck_service.correct(request.words)


@app.get("/words/{word}", response_model=WordResponse)
def word_lookup(word: str) -> WordResponse:
    return spellcheck_service.lookup(word)
