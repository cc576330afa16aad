# Example rules written by `linker config init`
DEFAULT_RULES: list[dict] = [
    {
        "name": "GitHub Repository",
        "type": "url",
        "target": "https://github.com/example/repo",
        "patterns": [
            {
                "type": "text",
                "value": "github.com/example/repo",
                "caseSensitive": False,
            }
        ],
        "description": "Example GitHub repository link",
    },
    {
        "name": "Config File",
        "type": "file",
        "target": "${workspaceFolder}/config.json",
        "patterns": [
            {
                "type": "text",
                "value": "config.json",
                "fileExtensions": [".js", ".ts", ".json", ".py"],
            }
        ],
        "description": "Link to configuration file",
    },
]
