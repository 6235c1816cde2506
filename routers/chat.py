from fastapi import APIRouter, Body
from fastapi.responses import HTMLResponse, JSONResponse

from chatbot import BOT_NAME, get_bot_reply
from ui import PAGE_STYLE, _nav_bar

router = APIRouter()


@router.post("/api/chat")
def api_chat(payload: dict = Body(...)):
    message = str(payload.get("message") or "").strip()
    if not message:
        return JSONResponse({"ok": False, "error": "Message is required"}, status_code=400)
    return JSONResponse({"ok": True, "sender": BOT_NAME, "reply": get_bot_reply(message)})


@router.get("/chat", response_class=HTMLResponse)
def chat_page():
    return f"""<!DOCTYPE html>
<html>
<head>{PAGE_STYLE}</head>
<body>
  {_nav_bar('chat')}
  <div class="container">
    <h1>Ask {BOT_NAME}</h1>
    <div class="chat-box" id="chatMessages">
      <div class="message bot"><div class="message-content"><strong>{BOT_NAME}:</strong>
        Hi! Ask me about symptoms, appointments or general health questions.</div></div>
    </div>
    <div style="display:flex; gap:8px; margin-top:12px;">
      <input type="text" id="chatInput" placeholder="Type your message..." autocomplete="off">
      <button class="btn-primary" id="sendBtn" type="button">Send</button>
    </div>
  </div>
  <script>
    const box = document.getElementById("chatMessages");
    const input = document.getElementById("chatInput");
    function appendChat(sender, text) {{
      const div = document.createElement("div");
      div.className = "message " + (sender === "bot" ? "bot" : "user");
      const content = document.createElement("div");
      content.className = "message-content";
      const who = document.createElement("strong");
      who.textContent = (sender === "bot" ? "{BOT_NAME}" : "You") + ": ";
      content.appendChild(who);
      content.appendChild(document.createTextNode(text));
      div.appendChild(content);
      box.appendChild(div);
      box.scrollTop = box.scrollHeight;
    }}
    async function sendChat() {{
      const msg = input.value.trim();
      if (!msg) return;
      appendChat("user", msg);
      input.value = "";
      const resp = await fetch("/api/chat", {{
        method: "POST",
        headers: {{"Content-Type": "application/json"}},
        body: JSON.stringify({{message: msg}}),
      }});
      const data = await resp.json();
      setTimeout(() => appendChat("bot", data.reply || data.error), 700);
    }}
    document.getElementById("sendBtn").addEventListener("click", sendChat);
    input.addEventListener("keydown", e => {{ if (e.key === "Enter") sendChat(); }});
  </script>
</body>
</html>"""
