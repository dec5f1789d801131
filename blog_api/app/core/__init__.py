"""Cross-cutting infrastructure: settings, logging, security, errors and storage."""
