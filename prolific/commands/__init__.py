"""Click command groups for studies, submissions, workspaces and the account."""