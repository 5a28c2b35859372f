"""People and submissions taking part in plagiarism checking."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Student:
    """A student who hands in submissions."""

    name: str

    def flag(self, submission: Submission) -> str:
        """Tell the student that ``submission`` was flagged; return the notice."""
        if submission.professor is None:
            raise ValueError(
                f"submission {submission.id} has no professor to defend in front of"
            )
        text = (
            f"I was flagged in {submission.display_name} and must defend myself "
            f"in front of Prof. {submission.professor.name}.\n"
        )
        sys.stdout.write(text)
        return text


@dataclass(frozen=True)
class Professor:
    """A professor who receives submissions."""

    name: str

    def flag(self, submission: Submission) -> str:
        """Tell the professor that ``submission`` was flagged; return the notice."""
        if submission.student is None:
            raise ValueError(f"submission {submission.id} has no student")
        text = (
            f"Student {submission.student.name} has plagiarized in "
            f"{submission.display_name} and will be receiving an FR grade.\n\n"
        )
        sys.stdout.write(text)
        return text


@dataclass(eq=False)
class Submission:
    """One code file handed in; compared and hashed by identity."""

    id: int
    student: Optional[Student]
    professor: Optional[Professor]
    codefile: str

    @property
    def display_name(self) -> str:
        """The code file path without its leading directory."""
        _, sep, rest = self.codefile.partition("/")
        return rest if sep else self.codefile