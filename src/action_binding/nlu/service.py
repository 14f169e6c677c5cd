"""
NLU service interface.
"""
from abc import ABC, abstractmethod

from ..models import NLUResult


class NLUService(ABC):
    """
    Turns raw user text into an NLUResult.

    Implementations are awaited once per query. Cancellation is the caller's:
    cancelling the awaiting task aborts the in-flight request.
    """

    @abstractmethod
    async def query(self, text: str) -> NLUResult:
        """
        Interpret ``text``.

        :param text: Raw utterance
        :return: Parsed NLU result
        """
        pass
