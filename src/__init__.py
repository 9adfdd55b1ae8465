"""git-updater - commit single-file changes to GitHub and GitLab repositories."""
