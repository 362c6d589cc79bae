"""Click plumbing shared by the epochctl command: base class and app context."""
