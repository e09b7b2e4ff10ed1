"""Append-only log of completed analyses."""

from dataclasses import dataclass, field

from nutri_balance.domain.submissions import Submission


@dataclass
class SubmissionLedger:
    """Submissions in the order they were appended."""

    submissions: list[Submission] = field(default_factory=list)

    def append(self, submission: Submission) -> None:
        self.submissions.append(submission)

    def __len__(self) -> int:
        return len(self.submissions)

    def to_csv(self) -> str:
        """Serialize as comma-joined rows under a header of field names.

        Nested values (meals, nutrients) are written with ``str()`` and nothing
        is quoted, so their embedded commas split into extra columns.
        """
        if not self.submissions:
            return ""
        rows = [submission.to_dict() for submission in self.submissions]
        keys = list(rows[0])
        lines = [",".join(keys)]
        lines.extend(",".join(str(row.get(key, "")) for key in keys) for row in rows)
        return "\n".join(lines)

    def to_state(self) -> list[dict[str, object]]:
        return [submission.to_dict() for submission in self.submissions]

    @classmethod
    def from_state(cls, rows: list[dict[str, object]]) -> "SubmissionLedger":
        return cls(submissions=[Submission.from_dict(row) for row in rows])
