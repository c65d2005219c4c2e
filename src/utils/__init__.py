"""
Utils package.

Models Structure:
- All models are Pydantic models (https://pydantic-docs.helpmanual.io/).
- All dates are timezone-aware UTC datetimes, stored in DynamoDB as ISO-8601 strings.
- All row keys are UUIDs (Universally Unique Identifiers) stored as strings.
- All models that need to be persisted to DynamoDB MUST implement:
    - `to_dynamodb_item()`: return a dictionary whose values are DynamoDB supported
      types (String, Number, Binary, Boolean, Null, List, Map).
    - `from_dynamodb_item(data: dict)`: build the model back from an item as retrieved
      from DynamoDB.
"""
