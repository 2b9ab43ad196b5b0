"""Git guidance prompts: best practices, commit messages, branch names.

Each handler ignores its inputs and returns the same document on every call.
"""

from mcp.types import GetPromptResult

from github_issue_developer.prompts.registry import text_prompt

GIT_BEST_PRACTICES_TEXT = """You are working on a software development project. Follow these Git best practices:

## Commit Guidelines:
1. Make atomic commits - each commit should represent a single logical change
2. Write clear, descriptive commit messages in present tense
3. Use conventional commit format: type(scope): description
4. Keep commits small and focused
5. Test your changes before committing

## Branch Management:
1. Use feature branches for new development
2. Keep main/master branch stable and deployable
3. Use descriptive branch names (feature/add-user-auth, bugfix/fix-login-error)
4. Regularly sync with main branch to avoid conflicts
5. Delete merged branches to keep repository clean

## Workflow Best Practices:
1. Pull latest changes before starting new work
2. Create feature branch from main
3. Make incremental commits with clear messages
4. Push regularly to backup your work
5. Create pull request when feature is complete
6. Review code thoroughly before merging
7. Use squash merge for clean history when appropriate

## Code Quality:
1. Run tests before committing
2. Use pre-commit hooks for code formatting and linting
3. Write meaningful commit messages that explain the "why"
4. Include relevant issue numbers in commit messages
5. Keep commits focused on a single concern

Apply these practices consistently to maintain a clean, professional development workflow."""

COMMIT_MESSAGE_FORMAT_TEXT = """You are writing commit messages. Follow these formatting guidelines:

## Conventional Commit Format:
<type>[optional scope]: <description>

[optional body]

[optional footer(s)]

## Commit Types:
- **feat**: A new feature for the user
- **fix**: A bug fix for the user
- **docs**: Documentation changes
- **style**: Code style changes (formatting, missing semicolons, etc.)
- **refactor**: Code refactoring without changing functionality
- **perf**: Performance improvements
- **test**: Adding or updating tests
- **chore**: Maintenance tasks, dependency updates
- **ci**: CI/CD configuration changes
- **build**: Build system or external dependency changes
- **revert**: Reverting a previous commit

## Examples:
feat(auth): add user login functionality
fix(api): resolve null pointer exception in user service
docs(readme): update installation instructions
style(components): format code according to style guide
refactor(utils): extract common validation logic
test(auth): add unit tests for login service
chore(deps): update dependencies to latest versions

## Best Practices:
1. **Use imperative mood**: "add feature" not "added feature"
2. **Keep subject line under 50 characters**
3. **Capitalize the subject line**
4. **Don't end subject line with a period**
5. **Use body to explain what and why, not how**
6. **Separate subject from body with blank line**
7. **Wrap body at 72 characters**
8. **Reference issues and PRs in footer**

Follow these guidelines to maintain a clean, professional commit history."""

BRANCH_NAMING_CONVENTION_TEXT = """You are creating Git branches. Follow these naming conventions:

## Branch Naming Format:
<type>/<short-description>
<type>/<issue-number>-<short-description>
<type>/<scope>/<short-description>

## Branch Types:
- **feature/**: New features or enhancements
- **bugfix/**: Bug fixes
- **hotfix/**: Critical fixes for production
- **release/**: Release preparation branches
- **chore/**: Maintenance tasks, refactoring
- **docs/**: Documentation updates
- **test/**: Test-related changes
- **experiment/**: Experimental or proof-of-concept work

## Naming Rules:
1. Use lowercase letters
2. Use hyphens (-) to separate words, not underscores or spaces
3. Keep names concise but descriptive
4. Include issue numbers when applicable
5. Avoid special characters except hyphens
6. Use present tense verbs

Choose a convention that works for your team and stick to it consistently."""


def git_best_practices(ctx, session, params) -> GetPromptResult:
    return text_prompt(
        "Git best practices for development workflow", GIT_BEST_PRACTICES_TEXT
    )


def commit_message_format(ctx, session, params) -> GetPromptResult:
    return text_prompt(
        "Commit message formatting guidelines using conventional commits",
        COMMIT_MESSAGE_FORMAT_TEXT,
    )


def branch_naming_convention(ctx, session, params) -> GetPromptResult:
    return text_prompt(
        "Branch naming convention guidelines for organized development",
        BRANCH_NAMING_CONVENTION_TEXT,
    )
