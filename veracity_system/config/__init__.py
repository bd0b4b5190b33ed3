"""Settings, trust tables and lexicons."""
