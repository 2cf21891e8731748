# =============================================================================
# lib/invitation_text.py - Share Links and Invitation Message
# =============================================================================
# Builds the personalized link a couple sends to each guest, and the
# Indonesian invitation message that wraps it (the text copied to the
# clipboard from the guest list).
#
# The public invitation page reads weddingId, groom_name, bride_name and
# invited_name from the query string.
# =============================================================================

from urllib.parse import quote

INVITATION_MESSAGE = """Assalamualaikum Warahmatullahi Wabarakatuh

Tanpa mengurangi rasa hormat, perkenankan kami mengundang Bapak/Ibu/Saudara/i {invited_name} untuk menghadiri acara pernikahan putra/i kami yaitu {groom_name} & {bride_name}.

Berikut link undangan kami, untuk info lengkap dari acara bisa kunjungi:

{link}

Merupakan suatu kebahagiaan bagi kami apabila Bapak/Ibu/Saudara/i berkenan untuk hadir dan memberikan doa restu.

Mohon maaf perihal undangan hanya di bagikan melalui pesan ini.

Dan agar selalu menjaga kesehatan bersama serta datang pada waktu yang telah ditentukan.

Terima kasih banyak atas perhatiannya.

Wassalamualaikum Warahmatullahi Wabarakatuh"""


def _encode(value: str) -> str:
    # Same escaping as JavaScript's encodeURIComponent
    return quote(value, safe="-_.!~*'()")


def build_share_link(
    base_url: str,
    wedding_id: str,
    groom_name: str,
    bride_name: str,
    invited_name: str,
) -> str:
    """
    Build the personalized invitation URL for one guest.

    Example:
        build_share_link("https://site", "42", "Budi", "Ani", "Pak Joko")
        # "https://site/wedding?weddingId=42&groom_name=Budi&bride_name=Ani&invited_name=Pak%20Joko"
    """
    return (
        f"{base_url.rstrip('/')}/wedding"
        f"?weddingId={_encode(str(wedding_id))}"
        f"&groom_name={_encode(groom_name)}"
        f"&bride_name={_encode(bride_name)}"
        f"&invited_name={_encode(invited_name)}"
    )


def build_share_message(link: str, groom_name: str, bride_name: str, invited_name: str) -> str:
    """Wrap a share link in the invitation message sent to the guest."""
    return INVITATION_MESSAGE.format(
        invited_name=invited_name,
        groom_name=groom_name,
        bride_name=bride_name,
        link=link,
    )
