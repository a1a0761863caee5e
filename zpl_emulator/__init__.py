"""ZPL printer emulator: renders raw label descriptions to PDF files on disk."""
