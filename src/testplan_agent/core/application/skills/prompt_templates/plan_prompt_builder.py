import json

from testplan_agent.core.domain import IssueRecord

INSTRUCTION = (
    "Given the following JIRA ticket details, generate a detailed test plan in markdown "
    "format, including functional tests, integration tests, and edge cases:"
)


class PlanPromptBuilder:
    """Builds the test plan prompt: a fixed instruction followed by the issue as indented JSON."""

    def build(self, issue: IssueRecord) -> str:
        return f"{INSTRUCTION}\n\n{self.render_issue(issue)}"

    @staticmethod
    def render_issue(issue: IssueRecord) -> str:
        return json.dumps(issue, indent=2)
