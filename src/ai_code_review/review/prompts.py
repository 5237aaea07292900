from ai_code_review.models.review import ReviewCategory


NO_TITLE = "No title provided"

BUGFIX_PREFIXES = ("error", "fix", "hotfix")


REVIEW_FOCUS: dict[ReviewCategory, str] = {
    ReviewCategory.BUGFIX: """For this bug fix PR, pay special attention to:
- Root cause analysis of the bug
- Whether the fix addresses the core issue
- Potential side effects of the fix
- Error handling and edge cases
- Prevention of similar issues""",
    ReviewCategory.FEATURE: """For this feature implementation PR, pay special attention to:
- Component structure and organization
- State management approach
- Code reusability and maintainability
- Performance considerations
- User interaction patterns""",
    ReviewCategory.STYLE: """For this style-related PR, pay special attention to:
- Consistency with existing styles
- Component styling best practices
- Responsive design considerations
- CSS optimization
- Accessibility standards""",
    ReviewCategory.BUILD: """For this build/configuration PR, pay special attention to:
- Build process impact
- Configuration changes
- Dependencies management
- Performance implications
- Development workflow effects""",
    ReviewCategory.GENERAL: """Please pay special attention to:
- Code quality and consistency
- Potential issues or bugs
- Performance considerations
- Best practices adherence
- Improvement suggestions""",
}


ROLE_AND_CONTEXT = """You are an expert code reviewer specialized in Next.js 15 with TypeScript, focusing on frontend development.

Pull Request Title: "{title}"
Type: {category}

Project Stack:
- Next.js 15 with TypeScript
- Component-based architecture
- Purpose: Warehouse Management System (WMS)"""


CONVENTIONS = """Coding Conventions:
- Follow Next.js 15 app router conventions
- Maintain consistent component structure"""


RESPONSE_FORMAT = """Please provide a structured code review with the following sections:
1. Overview: Brief summary of the changes
2. Issues: Any problems or concerns found, considering the specific focus points above
3. Suggestions: Specific improvement recommendations
4. Good Points: What was done well, with detailed and generous praise"""


def classify_title(title: str) -> ReviewCategory:
    """Derive the review category from the PR title prefix."""
    lower_title = title.lower()

    # Order matters: first matching prefix wins
    if lower_title.startswith(BUGFIX_PREFIXES):
        return ReviewCategory.BUGFIX
    if lower_title.startswith("feat"):
        return ReviewCategory.FEATURE
    if lower_title.startswith("style"):
        return ReviewCategory.STYLE
    if lower_title.startswith("build"):
        return ReviewCategory.BUILD
    return ReviewCategory.GENERAL


def guidance_for(category: ReviewCategory) -> str:
    """Return the review focus text for a category, falling back to general."""
    return REVIEW_FOCUS.get(category, REVIEW_FOCUS[ReviewCategory.GENERAL])


def build_review_prompt(
    title: str,
    patch: str,
    language: str | None = "",
    extra_guidelines: str | None = "",
    category: ReviewCategory | None = None,
) -> str:
    """Build the complete prompt for code review.

    The patch is appended verbatim at the very end; nothing is truncated or
    escaped.
    """
    if category is None:
        category = classify_title(title)

    role_and_context = ROLE_AND_CONTEXT.format(title=title, category=category.value)

    additional_guidelines = ""
    if extra_guidelines:
        additional_guidelines = f"\nAdditional Guidelines:\n{extra_guidelines}"

    request_parts = []
    if language:
        request_parts.append(f"Answer me in {language},")
    request_parts.append(guidance_for(category))
    request_parts.append(RESPONSE_FORMAT)
    request_parts.append(f"Here's the code to review:\n{patch}")
    review_request = "\n\n".join(request_parts)

    return f"{role_and_context}\n\n{CONVENTIONS}{additional_guidelines}\n\n{review_request}"
