from backoffice.core.hooks import ResourceQueries


class BrandQueries(ResourceQueries):
    key = "brands"
