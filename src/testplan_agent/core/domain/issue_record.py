from typing import Any

# Raw Jira issue payload, passed through untouched.
type IssueRecord = dict[str, Any]
