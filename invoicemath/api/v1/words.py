"""Amount-in-words endpoint."""

from fastapi import APIRouter

from ...models.document_models import WordsRequest
from ...models.outputs import WordsResponse
from ...services.money import money2, non_negative
from ...services.words import to_words

router = APIRouter()


@router.post("/compute/words", response_model=WordsResponse)
async def compute_words(payload: WordsRequest) -> WordsResponse:
    words = to_words(payload.amount)
    amount = money2(non_negative(payload.amount, "amount"))
    return WordsResponse(amount=amount, words=words)
