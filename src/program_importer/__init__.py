"""Program importer: parses coach-authored program text into structured programs."""
