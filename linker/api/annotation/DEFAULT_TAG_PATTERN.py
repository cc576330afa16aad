# @link [#anchor](target)
DEFAULT_TAG_PATTERN = r"@link\s+\[#(?<anchor>.+?)\]\((?<link>.+?)\)"
