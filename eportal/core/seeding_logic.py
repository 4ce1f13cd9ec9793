from loguru import logger
from sqlmodel import select
from sqlalchemy import delete

from eportal.core.config import settings
from eportal.core.constants import DEFAULT_ROLES, ADMIN_ROLE
from eportal.core.database import AsyncSessionLocal
from eportal.models.rbac import Role, RolePermission
from eportal.models.user import User
from eportal.services import rbac_service
from eportal.services.auth_service import get_user_by_email, create_user

# Placeholders for the fields a seeded administrator never filled in
SUPER_ADMIN_PROFILE = {
    "gender": "N/A",
    "date_of_birth": "N/A",
    "phone_number": "N/A",
    "state_of_origin": "N/A",
    "lga_of_origin": "N/A",
    "permanent_address": "N/A",
    "contact_address": "N/A",
}


# ----------------------------------------------------------------
# SEEDING FUNCTIONS
# ----------------------------------------------------------------

async def seed_all():
    """Master function run at startup."""
    async with AsyncSessionLocal() as session:
        try:
            await seed_rbac(session)
            await seed_super_admin(session)
            logger.success("✨ Seeding complete.")
        except Exception:
            logger.exception("❌ Seeding failed")
            await session.rollback()
            raise


async def seed_rbac(session):
    """Permission catalogue, default roles and their grants, then user_type -> role links."""
    by_key = await rbac_service.ensure_permission_catalogue(session)

    for role_data in DEFAULT_ROLES:
        result = await session.execute(select(Role).where(Role.name == role_data["name"]))
        role = result.scalar_one_or_none()
        if not role:
            logger.info(f"🌱 Creating Role: {role_data['name']}")
            role = Role(
                name=role_data["name"],
                description=role_data["description"],
                is_system_role=role_data["is_system_role"],
            )
            session.add(role)
            await session.flush()

        # default grants are reset on every run
        await session.execute(delete(RolePermission).where(RolePermission.role_id == role.id))
        if "*" in role_data["permissions"]:
            granted = list(by_key.values())
        else:
            granted = []
            for key in dict.fromkeys(role_data["permissions"]):
                permission = by_key.get(key)
                if permission is None:
                    logger.warning(f"⚠️ Unknown permission '{key}' for role {role_data['name']}")
                    continue
                granted.append(permission)

        for permission in granted:
            session.add(RolePermission(role_id=role.id, permission_id=permission.id))
        await session.flush()

    await assign_roles_from_user_type(session)
    await session.commit()


async def assign_roles_from_user_type(session):
    users = (await session.execute(select(User.id, User.user_type))).all()
    linked = 0
    for user_id, user_type in users:
        if await rbac_service.assign_default_role(session, user_id, user_type):
            linked += 1
    await session.flush()
    if linked:
        logger.info(f"🔗 Linked {linked} user(s) to their default role")


async def seed_super_admin(session):
    if not settings.SUPER_ADMIN_EMAIL or not settings.SUPER_ADMIN_PASSWORD:
        logger.warning("Missing Super Admin credentials in settings.")
        return

    user = await get_user_by_email(session, settings.SUPER_ADMIN_EMAIL)
    if user:
        logger.info("Super Admin already exists. Skipping.")
    else:
        logger.info(f"Seeding Super Admin: {settings.SUPER_ADMIN_EMAIL}")
        name = (settings.SUPER_ADMIN_NAME or "Super Admin").split(" ", 1)
        user = await create_user(
            session,
            data={
                "email": settings.SUPER_ADMIN_EMAIL,
                "first_name": name[0],
                "last_name": name[1] if len(name) > 1 else "Admin",
                **SUPER_ADMIN_PROFILE,
            },
            password=settings.SUPER_ADMIN_PASSWORD,
            user_type=ADMIN_ROLE,
        )
        logger.success("Super Admin created successfully.")

    if await rbac_service.assign_default_role(session, user.id, ADMIN_ROLE):
        await session.commit()
