# Files with these extensions open as text documents
TEXT_FILE_EXTENSIONS: frozenset[str] = frozenset(
    {
        # Programming language files
        ".txt", ".md", ".json", ".js", ".ts", ".jsx", ".tsx", ".py", ".java", ".cpp", ".c",
        ".h", ".hpp", ".cs", ".php", ".rb", ".go", ".rs", ".swift", ".kt", ".scala",
        ".html", ".css", ".scss", ".sass", ".less", ".xml", ".yaml", ".yml", ".toml",
        ".ini", ".cfg", ".conf", ".log", ".sql", ".sh", ".bash", ".zsh", ".fish",
        ".dockerfile", ".gitignore", ".gitattributes", ".editorconfig", ".eslintrc",
        ".prettierrc", ".babelrc", ".env", ".example", ".local", ".production",
        # Other text files
        ".csv", ".tsv", ".rss", ".atom", ".rdf", ".svg", ".tex", ".rst", ".adoc",
        ".wiki", ".text", ".asc", ".rtf", ".odt", ".fodt", ".sxw", ".stw",
    }
)  # fmt: skip
