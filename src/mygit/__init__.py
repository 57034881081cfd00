"""mygit - interactive helper for everyday git branch workflows."""
