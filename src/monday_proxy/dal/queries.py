"""
GraphQL documents sent to the Monday.com API.

Identifiers, board ids and column ids are always passed as variables so
caller supplied values never become part of the query text.
"""

ITEMS_BY_IDS_QUERY = """
query ($itemIds: [ID!], $columnIds: [String!]) {
  items(ids: $itemIds) {
    id
    name
    column_values(ids: $columnIds) {
      value
    }
  }
}
"""

ITEMS_BY_COLUMN_VALUE_QUERY = """
query ($boardId: ID!, $columnId: String!, $columnValue: String!, $columnIds: [String!]) {
  items_page_by_column_values(
    limit: 1,
    board_id: $boardId,
    columns: [{column_id: $columnId, column_values: [$columnValue]}]
  ) {
    items {
      id
      name
      column_values(ids: $columnIds) {
        id
        text
        column {
          title
        }
      }
    }
  }
}
"""
