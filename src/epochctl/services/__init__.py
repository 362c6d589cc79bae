"""Service layer. All public service methods return ServiceResult."""
