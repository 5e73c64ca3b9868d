class StoreError(Exception):
    """Business-rule failure that the API layer reports to the client as-is."""

    status_code = 400
    default_message = 'Request rejected'

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def payload(self):
        return {'message': self.message}
