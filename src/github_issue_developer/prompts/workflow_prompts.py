"""End-to-end development workflow prompt.

Walks an agent from picking up a GitHub issue to a merged pull request:
repository checks first, then branching, implementation, tests, docs and
the PR itself.
"""

from mcp.types import GetPromptResult

from github_issue_developer.prompts.registry import text_prompt

DEVELOPMENT_WORKFLOW_TEXT = """You are resolving a GitHub issue. Follow this development workflow from start to finish, in order.

## PRE-PROCESSING CHECKS (run these before touching any code):

### 1. Git Repository Validation
- Confirm the working directory is a Git repository (`git rev-parse --is-inside-work-tree`)
- Confirm a remote named `origin` exists and points at the expected GitHub repository
- Fetch the latest state: `git fetch origin`

### 2. Uncommitted Changes Check
- Run `git status --porcelain`
- If there are uncommitted or untracked changes, STOP and ask how to proceed
- Never stash, reset or discard someone else's work without explicit approval

### 3. Branch Protection Rule
- NEVER work on master/main branch directly
- If the current branch is main or master, create a new branch before any change
- Never force-push to a protected branch

## Branching:
1. Update the default branch: `git checkout main && git pull origin main`
2. Create a branch named after the issue: `feature/<issue-number>-<short-description>` or `bugfix/<issue-number>-<short-description>`
3. Keep one issue per branch

## Implementation:
1. Read the README.md FIRST to learn the project's setup, conventions and commands
2. Read the issue carefully, including comments and acceptance criteria
3. Make small, atomic commits using conventional commit messages that reference the issue
4. Follow the existing code style; do not reformat unrelated code

## Testing:
1. Write or update tests for every change
2. Aim for 100% coverage of new and modified code
3. Run the full test suite locally and make sure it passes before pushing
4. Run linters and formatters used by the project

## Documentation:
1. Update README.md and other docs when behavior, configuration or usage changes
2. Add or update docstrings and comments where the code is not self-explanatory

## Pull Request:
1. Push the branch: `git push -u origin <branch-name>`
2. Open the Pull Request with the gh CLI tool: `gh pr create --fill --base main`
3. Write a clear title and description, and link the issue (`Closes #<issue-number>`)
4. Request reviewers and respond to review comments promptly
5. Keep the branch up to date with main until it is merged

## CI/CD:
1. Wait for all CI/CD checks to pass (`gh pr checks`)
2. If a check fails, read the logs, fix the cause and push again
3. Never merge with failing checks or skipped required reviews
4. After merge, delete the branch locally and on the remote

Follow this development workflow for every issue to keep the repository healthy and the history clean."""


def development_workflow(ctx, session, params) -> GetPromptResult:
    return text_prompt(
        "Comprehensive development workflow with Git, GitHub, and CI/CD best practices",
        DEVELOPMENT_WORKFLOW_TEXT,
    )
