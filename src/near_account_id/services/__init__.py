"""Service layer: account ID operations wrapped in ServiceResult."""
