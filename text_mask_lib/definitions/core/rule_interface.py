"""
Definition of the rule interface that every mask definition must implement.
"""

from abc import ABC, abstractmethod


class MaskRuleI(ABC):
    """
    Abstract base class for all mask definition rules.

    A rule decides whether a single character may occupy a slot and, when
    the rule declares one, how an accepted character is transformed before
    it is stored (e.g. case folding).
    """

    @abstractmethod
    def match(self, char: str) -> bool:
        """
        Check whether *char* is accepted by the slot.

        Parameters
        ----------
        char: str
            A single character.

        Returns
        -------
        bool
            ``True`` if the character may fill the slot.
        """
        raise NotImplementedError

    @property
    def has_transform(self) -> bool:
        """
        ``True`` when :meth:`transform` changes characters.

        Formatting only calls :meth:`transform` for rules that report
        ``True`` here; a rule overriding :meth:`transform` must override
        this property as well.
        """
        return False

    def transform(self, char: str) -> str:
        """
        Return the character that is stored for an accepted *char*.

        The default implementation is the identity.
        """
        return char
