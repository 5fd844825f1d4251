"""Shared fixtures: the GitHunt example schema and rendering helpers."""

import re

import pytest
from graphql import build_schema, parse

from gql_typegen.core.config import GeneratorConfig
from gql_typegen.core.generator import CodeGenerator
from gql_typegen.core.operations import transform_documents
from gql_typegen.core.schema_builder import build_schema_context

GITHUNT_SDL = '''
"A list of options for the sort order of the feed"
enum FeedType {
  "Sort by a combination of freshness and score, using Reddit's algorithm"
  HOT
  "Newest entries first"
  NEW
  "Highest score entries first"
  TOP
}

type Query {
  "A feed of repository submissions"
  feed(type: FeedType!, offset: Int, limit: Int): [Entry]
  "A single entry"
  entry(repoFullName: String!): Entry
  "Return the currently logged in user, or null if nobody is logged in"
  currentUser: User
}

"The type of vote to record, when submitting a vote"
enum VoteType {
  UP
  DOWN
  CANCEL
}

type Mutation {
  "Submit a new repository, returns the new submission"
  submitRepository(repoFullName: String!): Entry
  "Vote on a repository submission, returns the submission that was voted on"
  vote(repoFullName: String!, type: VoteType!): Entry
  "Comment on a repository, returns the new comment"
  submitComment(repoFullName: String!, commentContent: String!): Comment
}

type Subscription {
  "Subscription fires on every comment added"
  commentAdded(repoFullName: String!): Comment
}

"A comment about an entry, submitted by a user"
type Comment {
  id: Int!
  postedBy: User!
  createdAt: Float!
  content: String!
  repoName: String!
}

"XXX to be removed"
type Vote {
  vote_value: Int!
}

"Information about a GitHub repository submitted to GitHunt"
type Entry {
  repository: Repository!
  postedBy: User!
  createdAt: Float!
  score: Int!
  hotScore: Float!
  comments(limit: Int, offset: Int): [Comment]!
  commentCount: Int!
  id: Int!
  vote: Vote!
}

"A repository object from the GitHub API"
type Repository {
  name: String!
  full_name: String!
  description: String
  html_url: String!
  stargazers_count: Int!
  open_issues_count: Int
  owner: User
}

"A user object from the GitHub API"
type User {
  login: String!
  avatar_url: String!
  html_url: String!
}
'''

_GITHUNT_ENUMS = '''
/* tslint:disable */
/** A list of options for the sort order of the feed */
export enum FeedType {
  HOT = "HOT",
  NEW = "NEW",
  TOP = "TOP",
}

/** The type of vote to record, when submitting a vote */
export enum VoteType {
  UP = "UP",
  DOWN = "DOWN",
  CANCEL = "CANCEL",
}
'''


def compress(text: str) -> str:
    """Drop all whitespace so outputs compare independently of layout."""
    return re.sub(r"\s+", "", text)


@pytest.fixture
def githunt_schema():
    """The GitHunt schema as a graphql-core GraphQLSchema."""
    return build_schema(GITHUNT_SDL)


@pytest.fixture
def githunt_context(githunt_schema):
    """The GitHunt schema context."""
    return build_schema_context(githunt_schema)


@pytest.fixture
def build_context():
    """Build a schema context from SDL."""
    def _build(sdl: str):
        return build_schema_context(build_schema(sdl))
    return _build


@pytest.fixture
def transform(githunt_context):
    """Transform operation source against the GitHunt schema."""
    def _transform(*sources: str):
        return transform_documents(githunt_context, [parse(source) for source in sources])
    return _transform


@pytest.fixture
def render_schema(build_context):
    """Render the schema-only output for SDL."""
    def _render(sdl: str, config: GeneratorConfig | None = None) -> str:
        return CodeGenerator(build_context(sdl), config).render()
    return _render


@pytest.fixture
def render_documents(githunt_context, transform):
    """Render enums and document types for operation source against GitHunt."""
    def _render(*sources: str, config: GeneratorConfig | None = None) -> str:
        generator = CodeGenerator(githunt_context, config, [transform(*sources)])
        return generator.render(generate_schema=False)
    return _render


@pytest.fixture
def assert_similar():
    """Compare generated code ignoring whitespace."""
    def _assert(actual: str, expected: str):
        assert compress(actual) == compress(expected), actual
    return _assert


@pytest.fixture
def githunt_enums():
    """Expected enum output of the GitHunt schema."""
    return _GITHUNT_ENUMS
