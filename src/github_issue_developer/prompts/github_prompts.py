"""GitHub collaboration prompts: repository workflow and code review."""

from mcp.types import GetPromptResult

from github_issue_developer.prompts.registry import text_prompt

GITHUB_WORKFLOW_TEXT = """You are collaborating on a GitHub project. Follow these GitHub workflow best practices:

## Issue Management:
1. Create detailed issues with clear descriptions and acceptance criteria
2. Use issue templates for consistency
3. Label issues appropriately (bug, feature, enhancement, etc.)
4. Assign issues to team members
5. Link issues to pull requests using keywords (fixes #123, closes #456)
6. Use project boards for tracking progress

## Pull Request Best Practices:
1. Create pull requests from feature branches
2. Write descriptive PR titles and descriptions
3. Include screenshots for UI changes
4. Reference related issues in PR description
5. Request reviews from appropriate team members
6. Respond to review comments promptly and professionally
7. Keep PRs focused and reasonably sized
8. Update PR branch with latest main before merging

## Code Review Guidelines:
1. Review code thoroughly for logic, style, and potential issues
2. Provide constructive feedback with suggestions
3. Approve PRs only when confident in the changes
4. Use GitHub's review features (comments, suggestions, approvals)
5. Test the changes locally when necessary
6. Check that CI/CD pipelines pass

## Repository Management:
1. Use branch protection rules for main branch
2. Require PR reviews before merging
3. Enable status checks and require them to pass
4. Use semantic versioning for releases
5. Maintain a clear README with setup instructions
6. Use GitHub Actions for CI/CD automation
7. Keep repository organized with proper folder structure

## Communication:
1. Use @mentions to notify relevant team members
2. Keep discussions focused and professional
3. Document decisions in issues and PRs
4. Use GitHub Discussions for broader topics
5. Update issue status regularly

Follow these practices to maintain an efficient and collaborative development environment."""

CODE_REVIEW_GUIDELINES_TEXT = """You are conducting a code review. Follow these comprehensive guidelines:

## What to Look For:
1. **Correctness**: Does the code do what it's supposed to do?
2. **Performance**: Are there any obvious performance issues?
3. **Security**: Are there potential security vulnerabilities?
4. **Maintainability**: Is the code easy to understand and modify?
5. **Testing**: Are there adequate tests for the changes?
6. **Documentation**: Is the code properly documented?

## Code Quality Checklist:
- [ ] Code follows project coding standards and style guidelines
- [ ] Variable and function names are descriptive and meaningful
- [ ] Code is properly structured and organized
- [ ] No code duplication (DRY principle)
- [ ] Functions are focused and do one thing well
- [ ] Error handling is appropriate and comprehensive
- [ ] No hardcoded values where configuration should be used
- [ ] Memory leaks and resource management are handled properly

## Review Process:
1. **Understand the Context**: Read the PR description and linked issues
2. **Check the Big Picture**: Does the approach make sense?
3. **Review Line by Line**: Look for bugs, style issues, and improvements
4. **Test Considerations**: Verify test coverage and quality
5. **Documentation**: Ensure code is well-documented
6. **Performance**: Consider performance implications
7. **Security**: Look for potential security issues

## Providing Feedback:
1. **Be Constructive**: Focus on the code, not the person
2. **Explain Why**: Provide reasoning for your suggestions
3. **Offer Solutions**: Don't just point out problems, suggest fixes
4. **Prioritize Issues**: Distinguish between critical issues and nice-to-haves
5. **Use Examples**: Show better alternatives when possible
6. **Be Respectful**: Maintain a professional and helpful tone

## Common Issues to Watch For:
- Null pointer exceptions and boundary conditions
- Race conditions in concurrent code
- SQL injection and other security vulnerabilities
- Memory leaks and resource management
- Inefficient algorithms or data structures
- Missing error handling
- Inconsistent coding style
- Lack of input validation
- Hardcoded configuration values
- Missing or inadequate tests

## Approval Criteria:
Only approve a PR when:
- All critical issues are resolved
- Code meets quality standards
- Tests are adequate and passing
- Documentation is sufficient
- You're confident the changes won't break existing functionality

Remember: Code review is a collaborative process aimed at improving code quality and sharing knowledge."""


def github_workflow(ctx, session, params) -> GetPromptResult:
    return text_prompt(
        "GitHub workflow best practices for collaborative development",
        GITHUB_WORKFLOW_TEXT,
    )


def code_review_guidelines(ctx, session, params) -> GetPromptResult:
    return text_prompt(
        "Comprehensive code review guidelines and best practices",
        CODE_REVIEW_GUIDELINES_TEXT,
    )
