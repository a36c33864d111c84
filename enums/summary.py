from enum import StrEnum, auto


class SummarySection(StrEnum):
    EXECUTIVE_SUMMARY = auto()
    KEY_INSIGHTS = auto()
    RISKS = auto()
    ACTION_ITEMS = auto()

    @property
    def heading(self) -> str:
        """Heading.

        Returns:
            The Markdown heading text of the section.

        """
        return self.value.replace("_", " ").title()


class SummaryPath(StrEnum):
    SINGLE_SHOT = auto()
    MAP_REDUCE = auto()
