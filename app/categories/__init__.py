"""Categories domain package: model, service layer, forms and CLI."""
