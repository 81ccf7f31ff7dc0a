"""Generate Markdown test plans for Jira tickets with the Cody CLI."""

__version__ = "0.1.0"
