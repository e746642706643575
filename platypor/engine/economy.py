"""Purchase handling: affordability, ownership and product effects."""

import logging
from typing import Optional, assert_never

from platypor.engine.action_resolver import ActionResolver
from platypor.models.balance import GameBalance
from platypor.models.catalog import Catalog, ProductDefinition, ProductKind
from platypor.models.player import PlayerState
from platypor.models.results import PurchaseResult, Rejection

logger = logging.getLogger(__name__)


class Economy:
    """Validates and applies purchases."""

    @staticmethod
    def is_owned(player: PlayerState, kind: ProductKind) -> bool:
        """Whether a non-consumable product is already owned."""
        match kind:
            case ProductKind.BEER | ProductKind.CIGARETTES | ProductKind.FREEDOM:
                return False
            case ProductKind.INSTRUCTIONS:
                return player.owns_instructions
            case ProductKind.PURSE:
                return player.owns_purse
            case ProductKind.SWORD:
                return player.owns_sword
            case ProductKind.SHIELD:
                return player.owns_shield
            case ProductKind.VISION:
                return player.owns_vision
            case ProductKind.BRAIN:
                return player.owns_memory
            case ProductKind.REACH:
                return player.owns_reach
            case ProductKind.ACID:
                return player.owns_stomach
            case ProductKind.PROPERTY:
                return player.owns_house
            case _:
                assert_never(kind)

    @staticmethod
    def purchase_blocker(
        player: PlayerState, balance: GameBalance, product: ProductDefinition
    ) -> Optional[Rejection]:
        """
        Check affordability, ownership and prerequisites of a product.

        Args:
            player: Player attempting the purchase
            balance: Balance configuration
            product: Catalog entry of the product

        Returns:
            None if the product can be bought, otherwise the rejection reason
        """
        kind = product.kind

        # The freedom product is an exact-balance puzzle, not a price check
        if kind == ProductKind.FREEDOM:
            if abs(player.money - balance.freedom_target_money) < balance.freedom_epsilon:
                return None
            return Rejection.EXACT_BALANCE_REQUIRED

        # NaN money never counts as affordable
        if not player.money >= product.price:
            return Rejection.INSUFFICIENT_FUNDS
        if kind is not None and Economy.is_owned(player, kind):
            return Rejection.ALREADY_OWNED
        if kind is not None and kind.requires_purse and not player.owns_purse:
            return Rejection.PURSE_REQUIRED
        return None

    @staticmethod
    def can_purchase(player: PlayerState, balance: GameBalance, product: ProductDefinition) -> bool:
        return Economy.purchase_blocker(player, balance, product) is None

    @staticmethod
    def purchase(
        player: PlayerState, balance: GameBalance, catalog: Catalog, product_id: str
    ) -> PurchaseResult:
        """
        Buy a product for the player in place.

        Args:
            player: Player to mutate
            balance: Balance configuration
            catalog: Catalog holding the product prices
            product_id: Catalog id of the product (e.g. "product_beer")

        Returns:
            PurchaseResult with acceptance and rejection reason
        """
        if player.is_dead:
            return PurchaseResult.rejected(Rejection.DEAD)

        product = catalog.get_product(product_id)
        if product is None:
            logger.warning(f"Unknown product id ignored: {product_id}")
            return PurchaseResult.rejected(Rejection.UNKNOWN_ID)

        if not ActionResolver.is_ready(player):
            return PurchaseResult.rejected(Rejection.NOT_READY)

        blocker = Economy.purchase_blocker(player, balance, product)
        if blocker is not None:
            return PurchaseResult.rejected(blocker)

        player.vigor = 0.0
        player.money -= product.price

        kind = product.kind
        if kind is None:
            logger.warning(f"Product {product_id} has no effect handler, price charged only")
        else:
            Economy._apply(player, kind)
        logger.info(f"Purchased {product_id} for {product.price}")
        return PurchaseResult.ok()

    @staticmethod
    def _apply(player: PlayerState, kind: ProductKind) -> None:
        match kind:
            case ProductKind.BEER:
                player.beers += 1
            case ProductKind.CIGARETTES:
                player.cigarettes += 1
            case ProductKind.INSTRUCTIONS:
                player.owns_instructions = True
            case ProductKind.PURSE:
                player.owns_purse = True
            case ProductKind.SWORD:
                player.owns_sword = True
                player.sword_equipped = True
            case ProductKind.SHIELD:
                player.owns_shield = True
                player.shield_equipped = True
            case ProductKind.VISION:
                player.owns_vision = True
            case ProductKind.BRAIN:
                player.owns_memory = True
            case ProductKind.REACH:
                player.owns_reach = True
            case ProductKind.ACID:
                player.owns_stomach = True
            case ProductKind.PROPERTY:
                player.owns_house = True
            case ProductKind.FREEDOM:
                pass
            case _:
                assert_never(kind)
