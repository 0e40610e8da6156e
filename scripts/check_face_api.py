"""
Live check of the Face API client against the real service.

Walks through the whole person group lifecycle:
create group -> create person -> add face -> train -> detect -> identify -> delete.

Usage:
    FACE_API_KEY=... FACE_API_REGION=WE python scripts/check_face_api.py <enroll_image_url> [<query_image_url>]
"""

import asyncio
import sys
import uuid

from dotenv import load_dotenv
load_dotenv()

from mscs_face import FaceServiceClient, FaceApiException, TrainingState
from mscs_face.core.config import get_settings
from mscs_face.core.logging import setup_logging, get_logger

logger = get_logger("check_face_api")

TRAINING_POLL_SECONDS = 2
TRAINING_POLL_ATTEMPTS = 30


async def run_step(results: list, title: str, coro):
    """Run one step, print the outcome and record it."""
    print(f"\n{title}")
    print("-" * 40)
    try:
        value = await coro
        print(f"✅ OK")
        if value is not None:
            print(f"   {value}")
        results.append((title, True))
        return value
    except FaceApiException as e:
        print(f"❌ {e.code}: {e.message}")
        results.append((title, False))
        return None


async def wait_for_training(client: FaceServiceClient, group_id: str):
    for _ in range(TRAINING_POLL_ATTEMPTS):
        status = await client.get_person_group_training_status(group_id)
        if status.is_finished:
            if status.status == TrainingState.FAILED:
                raise FaceApiException(status.message or "Training failed", code="TRAINING_FAILED")
            return status.status.value
        await asyncio.sleep(TRAINING_POLL_SECONDS)
    raise FaceApiException("Training did not finish in time", code="TRAINING_TIMEOUT")


async def main(enroll_url: str, query_url: str) -> int:
    settings = get_settings()
    setup_logging(level="DEBUG" if settings.debug else settings.log_level)

    group_id = f"check-{uuid.uuid4().hex[:12]}"
    results = []

    print("=" * 60)
    print("FACE API CHECK")
    print(f"Region: {settings.face_api_region}")
    print(f"Person group: {group_id}")
    print("=" * 60)

    async with FaceServiceClient.from_settings() as client:
        await run_step(results, "1. Create person group", client.create_person_group(group_id, "Check group"))
        try:
            await run_step(results, "2. Get person group", client.get_person_group(group_id))
            await run_step(results, "3. Update person group",
                           client.update_person_group(group_id, "Check group (updated)"))
            groups = await run_step(results, "4. List person groups", client.list_person_groups())
            if groups is not None:
                print(f"   Groups: {len(groups)}")

            person_id = await run_step(results, "5. Create person", client.create_person(group_id, "Check person"))
            if person_id:
                await run_step(results, "6. Add person face",
                               client.add_person_face(group_id, person_id, None, enroll_url))
            await run_step(results, "7. List persons", client.list_persons_in_person_group(group_id))
            await run_step(results, "8. Train person group", client.train_person_group(group_id))
            await run_step(results, "9. Wait for training", wait_for_training(client, group_id))

            faces = await run_step(results, "10. Detect faces", client.detect_face(query_url))
            if faces:
                identified = await run_step(results, "11. Identify faces",
                                            client.identify_face(group_id, [f.face_id for f in faces]))
                for item in identified or []:
                    best = item.best_candidate
                    print(f"   {item.face_id} -> {best.person_id if best else 'unknown'}")
        finally:
            await run_step(results, "12. Delete person group", client.delete_person_group(group_id))

    print("\n" + "=" * 60)
    print("SUMMARY")
    print("=" * 60)
    passed = sum(1 for _, ok in results if ok)
    for title, ok in results:
        print(f"{'✅' if ok else '❌'} {title}")
    print(f"\nPassed: {passed}/{len(results)}")
    return 0 if passed == len(results) else 1


if __name__ == "__main__":
    if len(sys.argv) < 2:
        print(__doc__)
        sys.exit(2)
    enroll = sys.argv[1]
    query = sys.argv[2] if len(sys.argv) > 2 else enroll
    sys.exit(asyncio.run(main(enroll, query)))
