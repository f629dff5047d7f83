"""Cover letter service: prompt construction, generation and draft persistence.

Generation is a single chat-completion call. The prompt pins the model to
the facts it is given so it does not invent employers, names or places.
"""

import logging

from domain.model.cover_letter import CoverLetterDraft
from domain.model.errors import NotFoundError, ValidationError
from domain.model.job import Job
from domain.model.user import User
from port.blob_storage import BlobStoragePort
from port.job_repository import JobRepository
from port.llm import LLMPort
from port.user_repository import UserRepository

logger = logging.getLogger(__name__)

TEMPERATURE = 0.7
FALLBACK_PROFILE = "Professional seeking opportunities"

SYSTEM_PROMPT = (
    "You are an expert career counselor and professional writer. You must write a "
    "complete, professional cover letter using ONLY the specific information provided. "
    "You must NEVER invent names, companies, locations, or other details that are not "
    "explicitly provided in the user profile and job description."
)

USER_PROMPT_TEMPLATE = """User Profile: {user_profile}

Job Description: {job_description}

Write a complete professional cover letter following these STRICT rules:
1. EXACTLY 120-150 words (count carefully)
2. Do NOT start with 'Dear Hiring Manager,' - start directly with the content
3. Use ONLY the specific job title, company name, and location from the job description
4. Use ONLY the specific user information provided (name, location, experience, etc.)
5. If company name is not provided, use 'the company' or 'your organization'
6. If location is not provided, do not mention location
7. If user's name is not provided, do not mention specific names
8. NEVER invent or guess: names, companies, locations, software, previous employers, etc.
9. Keep the content general but professional if specific details are missing
10. End with 'Sincerely,' followed by a new line
11. Focus on transferable skills and enthusiasm for the role
12. Must be complete and ready to send immediately

CRITICAL RULES:
- NO invented details anywhere in the letter
- NO fake company names, locations, or software mentions
- Use only what is explicitly provided in the inputs
- If information is missing, write around it professionally
- Keep it professional but general when specifics aren't available

Write the complete cover letter now:"""


def build_messages(job_description: str, user_profile: str) -> list[dict[str, str]]:
    return [
        {"role": "system", "content": SYSTEM_PROMPT},
        {
            "role": "user",
            "content": USER_PROMPT_TEMPLATE.format(
                user_profile=user_profile,
                job_description=job_description,
            ),
        },
    ]


async def generate(llm: LLMPort, job_description: str, user_profile: str) -> str:
    """Ask the LLM for a cover letter.

    Raises:
        LLMError: provider call failed (timeout, auth, rate limit, API error)
        RuntimeError: provider returned no content
    """
    content, stats = await llm.call(
        build_messages(job_description, user_profile),
        temperature=TEMPERATURE,
    )
    logger.info("Cover letter generated", extra={
        "model": stats.model,
        "total_tokens": stats.total_tokens,
        "length": len(content),
    })
    return content


def describe_job(job: Job) -> str:
    description = f"Job Title: {job.title}"
    if job.location:
        description += f", Location: {job.location}"
    if job.salary:
        description += f", Salary: {job.salary}"
    if job.snippet:
        description += f"\n\nJob Description: {job.snippet}"
    return description


def describe_applicant(user: User) -> str:
    profile = f"Name: {user.first_name} {user.last_name}, Email: {user.email}"
    if user.location:
        profile += f", Location: {user.location}"
    return profile


async def generate_from_job(
    llm: LLMPort,
    jobs: JobRepository,
    users: UserRepository,
    job_id: int,
    user_id: int | None = None,
    custom_profile: str | None = None,
) -> tuple[str, Job, str]:
    """Generate a cover letter for a stored job.

    The applicant profile comes from the user account when one is found,
    then from ``custom_profile``, then a neutral fallback.

    Returns:
        (cover_letter, job, user_profile)

    Raises:
        ValidationError: job_id is not positive
        NotFoundError: job does not exist
    """
    if job_id <= 0:
        raise ValidationError("JobId is required and must be greater than 0.")

    job = jobs.get_by_id(job_id)
    if not job:
        raise NotFoundError(f"Job with ID {job_id} not found.")

    user_profile = ""
    if user_id is not None:
        user = users.get_by_id(user_id)
        if user:
            user_profile = describe_applicant(user)
    if not user_profile:
        user_profile = custom_profile or FALLBACK_PROFILE

    cover_letter = await generate(llm, describe_job(job), user_profile)
    return cover_letter, job, user_profile


def save_draft(storage: BlobStoragePort, draft: CoverLetterDraft) -> str:
    """Persist a draft for the email worker. Returns the blob name."""
    blob_name = storage.upload_draft(draft)
    logger.info("Cover letter saved", extra={"blobName": blob_name, "email": draft.email})
    return blob_name
