"""goproj subcommands."""
