# Set by initializer.init_properties() at startup. Session state never
# lives here; each InteractiveClient owns its own.
property_registry: 'PropertyRegistry' = None
