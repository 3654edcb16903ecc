"""Configuration, logging, error types and the spreadsheet client."""
