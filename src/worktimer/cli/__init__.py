"""Terminal front end for worktimer."""
