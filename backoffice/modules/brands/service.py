from backoffice.core.service import ResourceService


class BrandService(ResourceService):
    path = "/brands"
