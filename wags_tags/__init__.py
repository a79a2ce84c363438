"""Environment-aware semantic version tagging for Git repositories."""
