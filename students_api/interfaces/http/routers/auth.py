from fastapi import APIRouter, Depends, status

from ..authz import current_user
from ..dependencies import get_hasher, get_token_service, get_user_repo
from ..schemas import Envelope, LoginReq, RegisterReq, TokenResp, UserResp
from ....application.dto import RegisterUserInput, TokenClaims
from ....application.use_cases.login_user import ITokenService, LoginUser
from ....application.use_cases.register_user import IPasswordHasher, IUserRepository, RegisterUser
from ....domain.errors import InvalidCredentials
from ....infrastructure.metrics import auth_logins_total

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", response_model=Envelope[UserResp], status_code=status.HTTP_201_CREATED,
             response_model_exclude_none=True)
async def register(
    payload: RegisterReq | None = None,
    repo: IUserRepository = Depends(get_user_repo),
    hasher: IPasswordHasher = Depends(get_hasher),
):
    payload = payload or RegisterReq()
    uc = RegisterUser(repo=repo, hasher=hasher)
    user = await uc.execute(RegisterUserInput(payload.username, payload.password, payload.role))
    return Envelope[UserResp](message="User registered successfully", data=UserResp(**user.public()))


@router.post("/login", response_model=Envelope[TokenResp], response_model_exclude_none=True)
async def login(
    payload: LoginReq | None = None,
    repo: IUserRepository = Depends(get_user_repo),
    hasher: IPasswordHasher = Depends(get_hasher),
    tokens: ITokenService = Depends(get_token_service),
):
    payload = payload or LoginReq()
    uc = LoginUser(repo=repo, hasher=hasher, tokens=tokens)
    try:
        result = await uc.execute(payload.username, payload.password)
    except InvalidCredentials:
        auth_logins_total.labels(outcome="rejected").inc()
        raise
    auth_logins_total.labels(outcome="accepted").inc()
    return Envelope[TokenResp](
        message="Login successful",
        data=TokenResp(token=result.token, user=UserResp(**result.user)),
    )


@router.get("/me", response_model=Envelope[UserResp], response_model_exclude_none=True)
async def me(claims: TokenClaims = Depends(current_user)):
    return Envelope[UserResp](data=UserResp(id=claims.id, username=claims.username, role=claims.role.value))
