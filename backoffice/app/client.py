import httpx

from backoffice.core.config import settings
from backoffice.core.credentials import CredentialStore, MemoryCredentialStore
from backoffice.core.dispatcher import Dispatcher
from backoffice.core.events import SessionEvents
from backoffice.core.query import QueryClient
from backoffice.core.transport import HttpxTransport, Transport
from backoffice.modules.accounting.service import AccountingService
from backoffice.modules.auth.service import PUBLIC_PATHS, AuthService
from backoffice.modules.brands.hooks import BrandQueries
from backoffice.modules.brands.service import BrandService
from backoffice.modules.categories.hooks import CategoryQueries
from backoffice.modules.categories.service import CategoryService
from backoffice.modules.notifications.service import NotificationService
from backoffice.modules.notifications.store import NotificationStore
from backoffice.modules.orders.hooks import OrderQueries
from backoffice.modules.orders.service import OrderService
from backoffice.modules.products.hooks import ProductQueries
from backoffice.modules.products.service import ProductService
from backoffice.modules.roles.hooks import RoleQueries
from backoffice.modules.roles.service import RoleService
from backoffice.modules.settings.service import SettingsService
from backoffice.modules.suppliers.service import SupplierService
from backoffice.modules.transactions.service import TransactionService
from backoffice.modules.upload.service import UploadService
from backoffice.modules.users.hooks import UserQueries
from backoffice.modules.users.service import UserService


class BackofficeClient:
    """Один диспетчер и одно хранилище токенов на все сервисы.

    async with BackofficeClient() as api:
        await api.auth.login("admin@shop.io", "secret")
        page = await api.products.list(ProductQuery(search="tea"))
    """

    def __init__(
        self,
        base_url: str | None = None,
        store: CredentialStore | None = None,
        transport: Transport | None = None,
        events: SessionEvents | None = None,
    ):
        self.base_url = base_url or settings.API_BASE_URL
        self.store = store or MemoryCredentialStore()
        self.events = events or SessionEvents()
        self.transport = transport or HttpxTransport(self.base_url, httpx.AsyncClient())
        self.dispatcher = Dispatcher(self.transport, self.store, self.events, public_paths=PUBLIC_PATHS)
        self.queries = QueryClient()
        self.notification_store = NotificationStore()

        self.auth = AuthService(self.dispatcher)
        self.products = ProductService(self.dispatcher)
        self.categories = CategoryService(self.dispatcher)
        self.brands = BrandService(self.dispatcher)
        self.orders = OrderService(self.dispatcher)
        self.suppliers = SupplierService(self.dispatcher)
        self.transactions = TransactionService(self.dispatcher)
        self.accounting = AccountingService(self.dispatcher)
        self.notifications = NotificationService(self.dispatcher)
        self.roles = RoleService(self.dispatcher)
        self.settings = SettingsService(self.dispatcher)
        self.users = UserService(self.dispatcher)
        self.upload = UploadService(self.dispatcher)

        self.product_queries = ProductQueries(self.products, self.queries)
        self.category_queries = CategoryQueries(self.categories, self.queries)
        self.brand_queries = BrandQueries(self.brands, self.queries)
        self.order_queries = OrderQueries(self.orders, self.queries)
        self.role_queries = RoleQueries(self.roles, self.queries)
        self.user_queries = UserQueries(self.users, self.queries)

        # после выхода из сессии кэш экранов чужой
        self.events.subscribe(lambda event: self.queries.clear())

    async def logout(self) -> None:
        await self.auth.logout()
        self.queries.clear()
        self.notification_store.set_notifications([])
        self.notification_store.set_unread_count(0)

    async def aclose(self) -> None:
        close = getattr(self.transport, "aclose", None)
        if close is not None:
            await close()

    async def __aenter__(self) -> "BackofficeClient":
        return self

    async def __aexit__(self, *exc) -> None:
        await self.aclose()
