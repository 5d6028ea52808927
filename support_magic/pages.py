"""
GET / 返回的交互页面
输入 Loom 链接 → /scrape → /analyze-transcript → 展示生成的 Markdown
"""

INDEX_HTML = r"""<!DOCTYPE html>
<html>
<head>
  <title>Roster Support Magic</title>
  <link href="https://cdnjs.cloudflare.com/ajax/libs/prism/1.29.0/themes/prism.min.css" rel="stylesheet" />
  <link href="https://cdnjs.cloudflare.com/ajax/libs/prism/1.29.0/plugins/toolbar/prism-toolbar.min.css" rel="stylesheet" />
  <style>
    body { font-family: Arial, sans-serif; max-width: 800px; margin: 40px auto; padding: 0 20px; }
    .form-group { margin-bottom: 20px; display: flex; gap: 10px; align-items: flex-end; }
    .input-container { flex: 1; display: flex; flex-direction: column; }
    input[type="url"] { padding: 8px; margin-top: 8px; }
    button {
      padding: 10px 20px; background: #0066ff; color: white;
      border: none; border-radius: 4px; cursor: pointer; height: 37px;
    }
    button:hover { background: #0052cc; }
    button:disabled { background: #cccccc; }
    .error { color: red; display: none; margin-top: 5px; }
    #loading, #analysisLoading { display: none; margin-top: 20px; }
    #transcript { white-space: pre-wrap; background: #f5f5f5; padding: 20px; margin-top: 20px; display: none; }
    .code-container { position: relative; margin-top: 20px; display: none; }
    .copy-button { position: absolute; top: 10px; right: 10px; padding: 5px 10px; height: auto; }
    pre[class*="language-"] { margin-top: 0; padding: 2.5em; border-radius: 4px; white-space: pre-wrap; }
    code[class*="language-"] { white-space: pre-wrap !important; }
  </style>
</head>
<body>
  <h1>Loom Transcript Extractor</h1>

  <form id="transcriptForm" onsubmit="return false;">
    <div class="form-group">
      <div class="input-container">
        <label for="loomUrl">Loom Video URL</label>
        <input type="url" id="loomUrl" required
               placeholder="https://www.loom.com/share/..."
               pattern="https://www\.loom\.com/share/[a-zA-Z0-9]+(\?.*)?$">
        <div class="error" id="urlError">Please enter a valid Loom URL (https://www.loom.com/share/...)</div>
      </div>
      <button type="submit" id="submitBtn">Make magic ✨</button>
    </div>
  </form>

  <div id="loading">Extracting Loom transcript...</div>
  <div id="analysisLoading">Generating article from transcript...</div>

  <pre id="transcript"></pre>
  <div id="analysis" class="code-container">
    <button class="copy-button" onclick="copyToClipboard()">Copy</button>
    <pre><code class="language-markdown"></code></pre>
  </div>

  <script src="https://cdnjs.cloudflare.com/ajax/libs/prism/1.29.0/prism.min.js"></script>
  <script src="https://cdnjs.cloudflare.com/ajax/libs/prism/1.29.0/components/prism-markdown.min.js"></script>
  <script>
    const form = document.getElementById('transcriptForm');
    const urlInput = document.getElementById('loomUrl');
    const urlError = document.getElementById('urlError');
    const loading = document.getElementById('loading');
    const transcript = document.getElementById('transcript');
    const submitBtn = document.getElementById('submitBtn');
    const analysisLoading = document.getElementById('analysisLoading');
    const analysis = document.getElementById('analysis');

    urlInput.addEventListener('input', () => {
      urlError.style.display = 'none';
    });

    form.addEventListener('submit', async (e) => {
      e.preventDefault();

      const url = urlInput.value.trim().split('?')[0];
      if (!/^https:\/\/www\.loom\.com\/share\/[a-zA-Z0-9]+$/.test(url)) {
        urlError.style.display = 'block';
        return;
      }

      loading.style.display = 'block';
      transcript.style.display = 'none';
      analysis.style.display = 'none';
      submitBtn.disabled = true;

      try {
        const response = await fetch('/scrape?url=' + encodeURIComponent(url));
        if (!response.ok) throw new Error('Failed to fetch transcript');

        const transcriptText = await response.text();
        transcript.textContent = transcriptText;
        analysisLoading.style.display = 'block';

        const analysisResponse = await fetch('/analyze-transcript', {
          method: 'POST',
          headers: { 'Content-Type': 'application/json' },
          body: JSON.stringify({ transcript: transcriptText, originalUrl: url }),
        });
        if (!analysisResponse.ok) throw new Error('Failed to analyze transcript');

        const analysisResult = await analysisResponse.json();
        const codeElement = document.querySelector('#analysis code');
        codeElement.textContent = analysisResult.response;
        analysis.style.display = 'block';
        Prism.highlightElement(codeElement);
      } catch (error) {
        alert('Error: ' + error.message);
      } finally {
        loading.style.display = 'none';
        analysisLoading.style.display = 'none';
        submitBtn.disabled = false;
      }
    });

    function copyToClipboard() {
      const codeElement = document.querySelector('#analysis code');
      navigator.clipboard.writeText(codeElement.textContent).then(() => {
        const copyButton = document.querySelector('.copy-button');
        copyButton.textContent = 'Copied!';
        setTimeout(() => { copyButton.textContent = 'Copy'; }, 2000);
      }).catch(err => {
        console.error('Failed to copy:', err);
      });
    }
  </script>
</body>
</html>
"""
