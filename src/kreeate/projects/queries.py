"""GraphQL documents used to read project boards."""

# Single round trip: viewer login plus the board under either owner kind.
# Only one of user/organization resolves for a given login. Items are not
# paginated; boards with more than 100 items are truncated.
PROJECT_BOARD_QUERY = """
query ProjectBoard($owner: String!, $number: Int!) {
  viewer {
    login
  }
  user(login: $owner) {
    projectV2(number: $number) {
      ...ProjectBoardFields
    }
  }
  organization(login: $owner) {
    projectV2(number: $number) {
      ...ProjectBoardFields
    }
  }
}

fragment ProjectBoardFields on ProjectV2 {
  id
  title
  url
  items(first: 100) {
    nodes {
      id
      isArchived
      fieldValues(first: 20) {
        nodes {
          __typename
          ... on ProjectV2ItemFieldSingleSelectValue {
            name
            optionId
            field {
              ... on ProjectV2SingleSelectField {
                name
              }
            }
          }
        }
      }
      content {
        __typename
        ... on Issue {
          title
          url
          state
          updatedAt
          repository {
            nameWithOwner
          }
          assignees(first: 10) {
            nodes {
              login
              avatarUrl
            }
          }
        }
        ... on PullRequest {
          title
          url
          state
          updatedAt
          repository {
            nameWithOwner
          }
          assignees(first: 10) {
            nodes {
              login
              avatarUrl
            }
          }
        }
        ... on DraftIssue {
          title
        }
      }
    }
  }
}
"""
