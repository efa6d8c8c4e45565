"""Terminal surfaces and CLI for mcchat."""
